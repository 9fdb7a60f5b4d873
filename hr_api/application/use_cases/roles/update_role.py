"""Use case for renaming roles."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.infrastructure.repositories import RoleRepository
from .validators import ensure_unique_role_name

logger = logging.getLogger(__name__)


def update_role(session: Session, *, role_id: Any, name: Any) -> bool:
    """Rename a role. Returns ``False`` when the role does not exist."""

    reference = Role.reference(role_id)
    role = Role(id=reference.id, name=Role.new(name).name)
    repository = RoleRepository(session)
    ensure_unique_role_name(role.name, repository, exclude_id=role.id)

    updated = repository.update(role)
    if updated:
        logger.info("Role %s renamed", role.id)
    return updated
