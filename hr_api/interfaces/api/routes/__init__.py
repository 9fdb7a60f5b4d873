from fastapi import FastAPI

from .auth import router as auth_router
from .employees import router as employees_router
from .health import router as health_router
from .roles import router as roles_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(roles_router)
    app.include_router(employees_router)
