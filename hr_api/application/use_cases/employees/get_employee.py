"""Use case for retrieving a single employee."""

from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Employee
from hr_api.domain.exceptions import NotFoundError
from hr_api.domain.validators import ensure_positive_id
from hr_api.infrastructure.repositories import EmployeeRepository


def get_employee(session: Session, employee_id: Any) -> Employee:
    """Return the requested employee or raise ``NotFoundError``."""

    valid_id = ensure_positive_id(employee_id)
    employee = EmployeeRepository(session).get(valid_id)
    if employee is None:
        raise NotFoundError(
            "Employee not found",
            detail={"message": f"There is no employee with id {valid_id}"},
        )
    return employee
