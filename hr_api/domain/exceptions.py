"""Error taxonomy shared by the domain and application layers.

Every error carries the HTTP-like status code it maps to, a human readable
message and an optional structured ``detail`` payload. The interface layer
translates them into the JSON error envelope without inspecting messages.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for errors that are safe to report to API clients."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, detail: Any = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, detail={self.detail!r})"


class ValidationError(DomainError):
    """Malformed input or a violated domain invariant."""

    status_code = 400
    default_message = "Invalid data"

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, detail={"field": field, "message": message})


class ConflictError(DomainError):
    """Uniqueness or referential conflict with data already stored."""

    status_code = 409
    default_message = "Resource already exists"


class NotFoundError(DomainError):
    status_code = 404
    default_message = "Resource not found"


class UnauthorizedError(DomainError):
    """Bad credentials or a missing, invalid or expired token."""

    status_code = 401
    default_message = "Unauthorized"


class InternalError(DomainError):
    status_code = 500


__all__ = [
    "ConflictError",
    "DomainError",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
