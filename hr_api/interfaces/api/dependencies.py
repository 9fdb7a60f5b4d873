"""FastAPI dependency utilities."""

from collections.abc import Generator
from typing import Any

from fastapi import Depends, Request, Response
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from hr_api.context import AppContext
from hr_api.domain.exceptions import UnauthorizedError
from hr_api.infrastructure.database import session_scope
from hr_api.infrastructure.security import TokenService

REFRESHED_TOKEN_HEADER = "X-Refreshed-Token"

authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer access token obtained from the login endpoint",
)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """Yield a request scoped database session."""

    yield from session_scope(context.session_factory)


def get_token_service(context: AppContext = Depends(get_context)) -> TokenService:
    return context.token_service


def require_token(
    request: Request,
    response: Response,
    authorization: str | None = Depends(authorization_header),
    token_service: TokenService = Depends(get_token_service),
) -> dict[str, Any]:
    """Reject the request unless it carries a valid token.

    On success the claims are returned and a renewed token is exposed in the
    ``X-Refreshed-Token`` response header, so every authenticated call extends
    the client's session.
    """

    validation = token_service.validate(authorization)
    if not validation.is_valid:
        raise UnauthorizedError(
            "Invalid token",
            detail={"message": "A valid bearer token is required"},
        )

    response.headers[REFRESHED_TOKEN_HEADER] = validation.refreshed_token
    request.state.refreshed_token = validation.refreshed_token
    return validation.claims
