"""Domain entity representing an employee."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from hr_api.domain.exceptions import ValidationError
from hr_api.domain.validators import (
    ensure_commute_flag,
    ensure_employee_name,
    ensure_password_policy,
    ensure_positive_id,
    ensure_valid_email,
)

from .role import Role


@dataclass(frozen=True)
class Employee:
    """Core attributes describing an employee.

    ``password`` holds the raw secret only between :meth:`register` and the
    moment the application layer hashes it. Employees loaded from the store
    carry the hash, and read projections carry ``None``.
    """

    id: int | None
    name: str
    email: str
    commutes_by_allowance: int
    role: Role
    password: str | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.id is not None:
            object.__setattr__(self, "id", ensure_positive_id(self.id))
        object.__setattr__(self, "name", ensure_employee_name(self.name))
        object.__setattr__(self, "email", ensure_valid_email(self.email))
        object.__setattr__(
            self,
            "commutes_by_allowance",
            ensure_commute_flag(self.commutes_by_allowance),
        )
        if not isinstance(self.role, Role) or self.role.id is None:
            raise ValidationError.for_field("role", "role must be a valid role reference")

    @classmethod
    def register(
        cls,
        *,
        name: Any,
        email: Any,
        password: Any,
        commutes_by_allowance: Any,
        role: Role,
        employee_id: Any = None,
    ) -> "Employee":
        """Build an employee from raw input, enforcing the password policy."""

        valid_name = ensure_employee_name(name)
        valid_email = ensure_valid_email(email)
        raw_password = ensure_password_policy(password)
        return cls(
            id=employee_id,
            name=valid_name,
            email=valid_email,
            commutes_by_allowance=commutes_by_allowance,
            role=role,
            password=raw_password,
        )

    def with_password(self, password: str | None) -> "Employee":
        return replace(self, password=password)

    def with_role(self, role: Role) -> "Employee":
        return replace(self, role=role)


__all__ = ["Employee"]
