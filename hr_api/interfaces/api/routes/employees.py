"""Routes for managing employees."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from hr_api.application.use_cases.employees import (
    create_employee as create_employee_uc,
    delete_employee as delete_employee_uc,
    get_employee as get_employee_uc,
    list_employees as list_employees_uc,
    update_employee as update_employee_uc,
)
from hr_api.domain.entities import Employee
from hr_api.domain.exceptions import NotFoundError
from hr_api.interfaces.api.dependencies import get_db, require_token
from hr_api.interfaces.api.schemas import (
    ERROR_RESPONSES,
    ApiResponse,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)

router = APIRouter(
    prefix="/api/v1/employees",
    tags=["employees"],
    dependencies=[Depends(require_token)],
    responses=ERROR_RESPONSES,
)


def _to_read_model(employee: Employee) -> EmployeeRead:
    return EmployeeRead.model_validate(employee)


@router.post(
    "",
    response_model=ApiResponse[EmployeeRead],
    status_code=status.HTTP_201_CREATED,
)
def register_employee(employee_in: EmployeeCreate, db: Session = Depends(get_db)):
    """Create an employee linked to an existing role."""

    employee = create_employee_uc(
        db,
        name=employee_in.name,
        email=employee_in.email,
        password=employee_in.password,
        commutes_by_allowance=employee_in.commutes_by_allowance,
        role_id=employee_in.role.id,
    )
    return ApiResponse[EmployeeRead](
        message="Employee created", data=_to_read_model(employee)
    )


@router.get("", response_model=ApiResponse[list[EmployeeRead]])
def list_employees(db: Session = Depends(get_db)):
    employees = list_employees_uc(db)
    return ApiResponse[list[EmployeeRead]](
        message="Employees retrieved",
        data=[_to_read_model(employee) for employee in employees],
    )


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def read_employee(employee_id: int, db: Session = Depends(get_db)):
    employee = get_employee_uc(db, employee_id)
    return ApiResponse[EmployeeRead](
        message="Employee retrieved", data=_to_read_model(employee)
    )


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    db: Session = Depends(get_db),
):
    """Update any subset of the employee's fields."""

    update_data = employee_in.model_dump(exclude_unset=True)
    role = update_data.pop("role", None)
    employee = update_employee_uc(
        db,
        employee_id=employee_id,
        role_id=role["id"] if role else None,
        **update_data,
    )
    return ApiResponse[EmployeeRead](
        message="Employee updated", data=_to_read_model(employee)
    )


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    if not delete_employee_uc(db, employee_id):
        raise NotFoundError(
            "Employee not found",
            detail={"message": f"There is no employee with id {employee_id}"},
        )
