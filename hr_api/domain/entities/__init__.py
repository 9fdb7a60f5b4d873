"""Domain entities exposed by the application."""

from .credentials import Credentials
from .employee import Employee
from .role import Role

__all__ = [
    "Credentials",
    "Employee",
    "Role",
]
