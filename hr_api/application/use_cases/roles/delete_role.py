"""Use case for deleting roles."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.domain.exceptions import ConflictError
from hr_api.infrastructure.repositories import EmployeeRepository, RoleRepository

logger = logging.getLogger(__name__)


def delete_role(session: Session, role_id: Any) -> bool:
    """Delete a role that no employee references.

    Returns ``False`` when the role does not exist.
    """

    reference = Role.reference(role_id)

    assigned = EmployeeRepository(session).count_by_role(reference.id)
    if assigned:
        raise ConflictError(
            "Role is assigned to employees",
            detail={
                "message": f"The role {reference.id} is assigned to {assigned} employee(s)"
            },
        )

    deleted = RoleRepository(session).delete(reference.id)
    if deleted:
        logger.info("Role %s deleted", reference.id)
    return deleted
