"""Routes for managing job roles."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from hr_api.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    get_role as get_role_uc,
    list_roles as list_roles_uc,
    update_role as update_role_uc,
)
from hr_api.domain.entities import Role
from hr_api.domain.exceptions import NotFoundError
from hr_api.interfaces.api.dependencies import get_db, require_token
from hr_api.interfaces.api.schemas import (
    ERROR_RESPONSES,
    ApiResponse,
    RoleCreate,
    RoleRead,
    RoleUpdate,
)

router = APIRouter(
    prefix="/api/v1/roles",
    tags=["roles"],
    dependencies=[Depends(require_token)],
    responses=ERROR_RESPONSES,
)


def _to_read_model(role: Role) -> RoleRead:
    return RoleRead.model_validate(role)


def _not_found(role_id: int) -> NotFoundError:
    return NotFoundError(
        "Role not found",
        detail={"message": f"There is no role with id {role_id}"},
    )


@router.post(
    "",
    response_model=ApiResponse[RoleRead],
    status_code=status.HTTP_201_CREATED,
)
def create_role(role_in: RoleCreate, db: Session = Depends(get_db)):
    """Create a role with a unique name."""

    role = create_role_uc(db, name=role_in.name)
    return ApiResponse[RoleRead](message="Role created", data=_to_read_model(role))


@router.get("", response_model=ApiResponse[list[RoleRead]])
def list_roles(db: Session = Depends(get_db)):
    roles = list_roles_uc(db)
    return ApiResponse[list[RoleRead]](
        message="Roles retrieved", data=[_to_read_model(role) for role in roles]
    )


@router.get("/{role_id}", response_model=ApiResponse[RoleRead])
def read_role(role_id: int, db: Session = Depends(get_db)):
    role = get_role_uc(db, role_id)
    return ApiResponse[RoleRead](message="Role retrieved", data=_to_read_model(role))


@router.put("/{role_id}", response_model=ApiResponse[RoleRead])
def update_role(role_id: int, role_in: RoleUpdate, db: Session = Depends(get_db)):
    """Rename the role identified by ``role_id``."""

    if not update_role_uc(db, role_id=role_id, name=role_in.name):
        raise _not_found(role_id)
    role = get_role_uc(db, role_id)
    return ApiResponse[RoleRead](message="Role updated", data=_to_read_model(role))


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_role(role_id: int, db: Session = Depends(get_db)):
    """Delete a role that is not assigned to any employee."""

    if not delete_role_uc(db, role_id):
        raise _not_found(role_id)
