"""Business rules shared by the role use cases."""

from hr_api.domain.exceptions import ConflictError
from hr_api.infrastructure.repositories import RoleRepository


def ensure_unique_role_name(
    name: str, repository: RoleRepository, *, exclude_id: int | None = None
) -> None:
    """Raise ``ConflictError`` when another role already uses ``name``."""

    for existing in repository.find_by_field("name", name):
        if exclude_id is None or existing.id != exclude_id:
            raise ConflictError(
                "Role already exists",
                detail={"message": f"The role {name} already exists"},
            )
