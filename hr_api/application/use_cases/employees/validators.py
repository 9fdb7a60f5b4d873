"""Business rules shared by the employee use cases."""

from hr_api.domain.entities import Role
from hr_api.domain.exceptions import ConflictError, ValidationError
from hr_api.infrastructure.repositories import EmployeeRepository, RoleRepository


def ensure_role_exists(role_id: int, repository: RoleRepository) -> Role:
    """Return the stored role or raise ``ValidationError`` when it is missing."""

    role = repository.get(role_id)
    if role is None:
        raise ValidationError(
            "Role does not exist",
            detail={"field": "role.id", "message": f"There is no role with id {role_id}"},
        )
    return role


def ensure_unique_email(
    email: str, repository: EmployeeRepository, *, exclude_id: int | None = None
) -> None:
    for existing in repository.find_by_field("email", email):
        if exclude_id is None or existing.id != exclude_id:
            raise ConflictError(
                "Email already registered",
                detail={"message": f"The email {email} is already registered"},
            )
