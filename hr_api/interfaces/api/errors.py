"""Uniform error responses for the API."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hr_api.domain.exceptions import DomainError, UnauthorizedError

from .dependencies import REFRESHED_TOKEN_HEADER

logger = logging.getLogger(__name__)

_INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    error: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    response_headers = dict(headers or {})
    refreshed_token = getattr(request.state, "refreshed_token", None)
    if refreshed_token:
        response_headers[REFRESHED_TOKEN_HEADER] = refreshed_token
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": False, "message": message, "error": error}),
        headers=response_headers or None,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Internal error on %s %s: %r", request.method, request.url.path, exc)
        return _error_response(request, exc.status_code, _INTERNAL_ERROR_MESSAGE)

    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return _error_response(request, exc.status_code, exc.message, exc.detail, headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, "Invalid data", {"errors": errors}
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR_MESSAGE
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors, schema errors and anything unexpected to the envelope."""

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    # Handled inside the middleware stack so CORS headers are kept.
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
