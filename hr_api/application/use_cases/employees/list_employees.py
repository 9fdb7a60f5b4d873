"""Use case for listing employees."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from hr_api.domain.entities import Employee
from hr_api.infrastructure.repositories import EmployeeRepository


def list_employees(session: Session) -> Sequence[Employee]:
    """Return every employee together with its role."""

    return EmployeeRepository(session).list()
