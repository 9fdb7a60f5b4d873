"""Field level validation helpers used by the domain entities.

Each helper returns the normalized value or raises
:class:`~hr_api.domain.exceptions.ValidationError` naming the field.
"""

from __future__ import annotations

import re
from typing import Any, Final

from .exceptions import ValidationError

ROLE_NAME_MIN_LENGTH: Final[int] = 3
ROLE_NAME_MAX_LENGTH: Final[int] = 64
EMPLOYEE_NAME_MIN_LENGTH: Final[int] = 3
PASSWORD_MIN_LENGTH: Final[int] = 6
PASSWORD_SPECIAL_CHARACTERS: Final[str] = '!@#$%^&*(),.?":{}|<>'

_EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def ensure_positive_id(value: Any, field: str = "id") -> int:
    """Return ``value`` as a positive integer.

    Integers and strings holding an integer are accepted. Booleans, floats
    with a fractional part, zero and negatives are rejected.
    """

    if isinstance(value, bool) or value is None:
        raise ValidationError.for_field(field, f"{field} must be an integer")

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str) and re.fullmatch(r"\s*[+-]?\d+\s*", value):
        parsed = int(value)
    else:
        raise ValidationError.for_field(field, f"{field} must be an integer")

    if parsed <= 0:
        raise ValidationError.for_field(field, f"{field} must be greater than zero")
    return parsed


def ensure_role_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError.for_field("name", "name must be a string")

    name = value.strip()
    if len(name) < ROLE_NAME_MIN_LENGTH:
        raise ValidationError.for_field(
            "name", f"name must have at least {ROLE_NAME_MIN_LENGTH} characters"
        )
    if len(name) > ROLE_NAME_MAX_LENGTH:
        raise ValidationError.for_field(
            "name", f"name must have at most {ROLE_NAME_MAX_LENGTH} characters"
        )
    return name


def ensure_employee_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError.for_field("name", "name must be a string")

    name = value.strip()
    if len(name) < EMPLOYEE_NAME_MIN_LENGTH:
        raise ValidationError.for_field(
            "name", f"name must have at least {EMPLOYEE_NAME_MIN_LENGTH} characters"
        )
    return name


def ensure_valid_email(value: Any) -> str:
    """Return the normalized email or raise when it is not ``local@domain.tld``.

    Emails are trimmed and lower-cased; the normalized form is what gets
    stored and looked up.
    """

    if not isinstance(value, str):
        raise ValidationError.for_field("email", "email must be a string")

    email = value.strip().lower()
    if not email:
        raise ValidationError.for_field("email", "email must not be empty")
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError.for_field("email", "email has an invalid format")
    return email


def ensure_password_policy(value: Any) -> str:
    """Return the trimmed password when it satisfies the password policy.

    The policy requires at least six characters, one uppercase letter, one
    digit and one character from :data:`PASSWORD_SPECIAL_CHARACTERS`.
    """

    if not isinstance(value, str):
        raise ValidationError.for_field("password", "password must be a string")

    password = value.strip()
    if not password:
        raise ValidationError.for_field("password", "password must not be empty")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError.for_field(
            "password", f"password must have at least {PASSWORD_MIN_LENGTH} characters"
        )
    if not any(char.isupper() for char in password):
        raise ValidationError.for_field(
            "password", "password must contain at least one uppercase letter"
        )
    if not any(char.isdigit() for char in password):
        raise ValidationError.for_field(
            "password", "password must contain at least one digit"
        )
    if not any(char in PASSWORD_SPECIAL_CHARACTERS for char in password):
        raise ValidationError.for_field(
            "password", "password must contain at least one special character"
        )
    return password


def ensure_commute_flag(value: Any) -> int:
    # JSON booleans arrive as bool; only the integers 0 and 1 are accepted.
    if isinstance(value, bool) or value not in (0, 1):
        raise ValidationError.for_field(
            "commutes_by_allowance", "commutes_by_allowance must be 0 or 1"
        )
    return int(value)


__all__ = [
    "EMPLOYEE_NAME_MIN_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_SPECIAL_CHARACTERS",
    "ROLE_NAME_MAX_LENGTH",
    "ROLE_NAME_MIN_LENGTH",
    "ensure_commute_flag",
    "ensure_employee_name",
    "ensure_password_policy",
    "ensure_positive_id",
    "ensure_role_name",
    "ensure_valid_email",
]
