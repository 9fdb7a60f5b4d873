"""Login credentials supplied by an employee."""

from __future__ import annotations

from dataclasses import dataclass, field

from hr_api.domain.validators import ensure_password_policy, ensure_valid_email


@dataclass(frozen=True)
class Credentials:
    """Email and raw password pair, validated like a new employee's."""

    email: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "email", ensure_valid_email(self.email))
        object.__setattr__(self, "password", ensure_password_policy(self.password))


__all__ = ["Credentials"]
