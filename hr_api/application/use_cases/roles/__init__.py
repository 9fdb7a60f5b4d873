"""Use cases for managing job roles."""

from .create_role import create_role
from .delete_role import delete_role
from .get_role import get_role
from .list_roles import list_roles
from .update_role import update_role

__all__ = [
    "create_role",
    "delete_role",
    "get_role",
    "list_roles",
    "update_role",
]
