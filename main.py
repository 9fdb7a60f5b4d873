from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_api.config import Settings, get_settings
from hr_api.context import build_context
from hr_api.infrastructure.database import initialize_database
from hr_api.interfaces.api.errors import register_exception_handlers
from hr_api.interfaces.api.routes import register_routes
from hr_api.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the pool on shutdown."""

    context = app.state.context
    initialize_database(context.engine)
    yield
    context.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="HR Management API", lifespan=lifespan)
    app.state.context = build_context(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Refreshed-Token"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
