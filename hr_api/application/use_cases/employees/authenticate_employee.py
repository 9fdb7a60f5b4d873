"""Use case for authenticating an employee."""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from hr_api.domain.entities import Credentials, Employee
from hr_api.domain.exceptions import UnauthorizedError
from hr_api.infrastructure.repositories import EmployeeRepository
from hr_api.infrastructure.security import TokenService, verify_password

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class LoginResult:
    """Sanitized view of the authenticated employee plus the access token."""

    user: dict[str, Any]
    token: str


def _token_claims(employee: Employee) -> dict[str, Any]:
    return {
        "email": employee.email,
        "role": employee.role.name,
        "name": employee.name,
        "id": employee.id,
    }


def authenticate_employee(
    session: Session,
    token_service: TokenService,
    *,
    email: Any,
    password: Any,
) -> LoginResult:
    """Verify the credentials and issue an access token.

    An unknown email and a wrong password produce the same error so callers
    cannot probe which accounts exist.
    """

    credentials = Credentials(email=email, password=password)
    employee = EmployeeRepository(session).get_by_email(
        credentials.email, with_password=True
    )

    if employee is None or not verify_password(credentials.password, employee.password):
        logger.info("Rejected login attempt for %s", credentials.email)
        raise UnauthorizedError(
            _INVALID_CREDENTIALS,
            detail={"message": "Authentication could not be completed"},
        )

    claims = _token_claims(employee)
    return LoginResult(user=claims, token=token_service.issue(claims))
