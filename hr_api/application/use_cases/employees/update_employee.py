"""Use case for updating employee information."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Employee, Role
from hr_api.domain.exceptions import NotFoundError
from hr_api.domain.validators import ensure_positive_id
from hr_api.infrastructure.repositories import EmployeeRepository, RoleRepository
from hr_api.infrastructure.security import get_password_hash
from .validators import ensure_role_exists, ensure_unique_email

logger = logging.getLogger(__name__)


def update_employee(
    session: Session,
    *,
    employee_id: Any,
    name: Any = None,
    email: Any = None,
    password: Any = None,
    commutes_by_allowance: Any = None,
    role_id: Any = None,
) -> Employee:
    """Apply the provided values over the stored employee.

    Omitted (``None``) fields keep their stored value. The merged employee is
    validated as a whole; a new email must not belong to another employee and
    a new role must exist. A supplied password is checked against the policy
    and rehashed.
    """

    valid_id = ensure_positive_id(employee_id)
    repository = EmployeeRepository(session)
    current = repository.get(valid_id)
    if current is None:
        raise NotFoundError(
            "Employee not found",
            detail={"message": f"There is no employee with id {valid_id}"},
        )

    role = Role.reference(role_id) if role_id is not None else current.role
    fields = {
        "name": name if name is not None else current.name,
        "email": email if email is not None else current.email,
        "commutes_by_allowance": (
            commutes_by_allowance
            if commutes_by_allowance is not None
            else current.commutes_by_allowance
        ),
        "role": role,
    }
    if password is not None:
        updated = Employee.register(employee_id=valid_id, password=password, **fields)
    else:
        updated = Employee(id=valid_id, **fields)

    if updated.email != current.email:
        ensure_unique_email(updated.email, repository, exclude_id=valid_id)
    if updated.role.id != current.role.id:
        new_role = ensure_role_exists(updated.role.id, RoleRepository(session))
        updated = updated.with_role(new_role)

    if updated.password:
        updated = updated.with_password(get_password_hash(updated.password))

    saved = repository.update(updated)
    if saved is None:
        # Deleted between the read and the write.
        raise NotFoundError(
            "Employee not found",
            detail={"message": f"There is no employee with id {valid_id}"},
        )
    logger.info("Employee %s updated", valid_id)
    return saved
