"""Login endpoint issuing access tokens."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hr_api.application.use_cases.employees import authenticate_employee
from hr_api.infrastructure.security import TokenService
from hr_api.interfaces.api.dependencies import get_db, get_token_service
from hr_api.interfaces.api.schemas import (
    ERROR_RESPONSES,
    ApiResponse,
    LoginData,
    LoginRequest,
)

router = APIRouter(
    prefix="/api/v1/employees",
    tags=["auth"],
    responses=ERROR_RESPONSES,
)


@router.post("/login", response_model=ApiResponse[LoginData])
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    """Authenticate an employee by email and password and return a token."""

    result = authenticate_employee(
        db,
        token_service,
        email=credentials.email,
        password=credentials.password,
    )
    return ApiResponse[LoginData](
        message="Login successful",
        data=LoginData(user=result.user, token=result.token),
    )
