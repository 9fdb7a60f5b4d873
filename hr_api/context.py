"""Process-wide collaborators assembled once at application start."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from hr_api.config import Settings
from hr_api.infrastructure.database import create_database_engine, create_session_factory
from hr_api.infrastructure.security import TokenService


@dataclass(frozen=True)
class AppContext:
    """Shared, read-only dependencies of every request."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    token_service: TokenService


def build_context(settings: Settings) -> AppContext:
    """Create the engine, session factory and token service in order."""

    engine = create_database_engine(settings)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        token_service=TokenService.from_settings(settings),
    )


__all__ = ["AppContext", "build_context"]
