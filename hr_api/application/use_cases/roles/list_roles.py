"""Use case for listing roles."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.infrastructure.repositories import RoleRepository


def list_roles(session: Session) -> Sequence[Role]:
    return RoleRepository(session).list()
