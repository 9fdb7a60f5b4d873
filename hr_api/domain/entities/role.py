"""Domain entity representing a job role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hr_api.domain.validators import ensure_positive_id, ensure_role_name


@dataclass(frozen=True)
class Role:
    """A named job position that employees are assigned to.

    A role read from the store carries both ``id`` and ``name``. A role that
    has not been persisted yet has no ``id``, and a plain reference used to
    link an employee may carry only the ``id``. Whatever is present is
    validated on construction.
    """

    id: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.id is not None:
            object.__setattr__(self, "id", ensure_positive_id(self.id))
        if self.name is not None:
            object.__setattr__(self, "name", ensure_role_name(self.name))

    @classmethod
    def new(cls, name: Any) -> "Role":
        """Return a role that is not stored yet."""

        return cls(id=None, name=ensure_role_name(name))

    @classmethod
    def reference(cls, role_id: Any) -> "Role":
        """Return a role reference carrying only a validated ``id``."""

        return cls(id=ensure_positive_id(role_id, "role.id"))


__all__ = ["Role"]
