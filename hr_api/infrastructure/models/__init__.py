"""ORM models used by the application infrastructure."""

from .employee import EmployeeModel
from .role import RoleModel

__all__ = [
    "EmployeeModel",
    "RoleModel",
]
