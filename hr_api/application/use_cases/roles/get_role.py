"""Use case for retrieving a single role."""

from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.domain.exceptions import NotFoundError
from hr_api.infrastructure.repositories import RoleRepository


def get_role(session: Session, role_id: Any) -> Role:
    """Return the requested role or raise ``NotFoundError``."""

    reference = Role.reference(role_id)
    role = RoleRepository(session).get(reference.id)
    if role is None:
        raise NotFoundError(
            "Role not found",
            detail={"message": f"There is no role with id {reference.id}"},
        )
    return role
