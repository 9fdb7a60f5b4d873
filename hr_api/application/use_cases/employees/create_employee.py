"""Use case for creating employees."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Employee, Role
from hr_api.infrastructure.repositories import EmployeeRepository, RoleRepository
from hr_api.infrastructure.security import get_password_hash
from .validators import ensure_role_exists, ensure_unique_email

logger = logging.getLogger(__name__)


def create_employee(
    session: Session,
    *,
    name: Any,
    email: Any,
    password: Any,
    commutes_by_allowance: Any,
    role_id: Any,
) -> Employee:
    """Create a new employee linked to an existing role.

    The role must exist and the email must not be registered yet; both checks
    run after every field has passed domain validation and before anything is
    written. The password is hashed right before persistence.
    """

    role_reference = Role.reference(role_id)
    employee = Employee.register(
        name=name,
        email=email,
        password=password,
        commutes_by_allowance=commutes_by_allowance,
        role=role_reference,
    )

    repository = EmployeeRepository(session)
    role = ensure_role_exists(role_reference.id, RoleRepository(session))
    ensure_unique_email(employee.email, repository)

    hashed_password = get_password_hash(employee.password)
    created = repository.create(employee.with_role(role).with_password(hashed_password))
    logger.info("Employee %s created with role %s", created.id, role.id)
    return created
