"""Repository implementations for infrastructure layer."""

from .employee_repository import EmployeeRepository
from .role_repository import RoleRepository

__all__ = [
    "EmployeeRepository",
    "RoleRepository",
]
