"""Use case for creating roles."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.infrastructure.repositories import RoleRepository
from .validators import ensure_unique_role_name

logger = logging.getLogger(__name__)


def create_role(session: Session, *, name: Any) -> Role:
    """Create a new role ensuring role names stay unique."""

    role = Role.new(name)
    repository = RoleRepository(session)
    ensure_unique_role_name(role.name, repository)

    created = repository.create(role)
    logger.info("Role %s created", created.id)
    return created
