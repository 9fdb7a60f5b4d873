"""Use case for deleting an employee."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.validators import ensure_positive_id
from hr_api.infrastructure.repositories import EmployeeRepository

logger = logging.getLogger(__name__)


def delete_employee(session: Session, employee_id: Any) -> bool:
    """Delete the employee. Returns ``False`` when it does not exist."""

    valid_id = ensure_positive_id(employee_id)
    deleted = EmployeeRepository(session).delete(valid_id)
    if deleted:
        logger.info("Employee %s deleted", valid_id)
    return deleted
