from .auth import LoginData, LoginRequest, SessionUser
from .common import ERROR_RESPONSES, ApiResponse, ErrorResponse
from .employee import EmployeeCreate, EmployeeRead, EmployeeUpdate, RoleReference
from .role import RoleCreate, RoleRead, RoleUpdate

__all__ = [
    "ERROR_RESPONSES",
    "ApiResponse",
    "EmployeeCreate",
    "EmployeeRead",
    "EmployeeUpdate",
    "ErrorResponse",
    "LoginData",
    "LoginRequest",
    "RoleCreate",
    "RoleRead",
    "RoleReference",
    "RoleUpdate",
    "SessionUser",
]
