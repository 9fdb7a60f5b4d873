"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from hr_api.config import Settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)


def _is_sqlite(database_url: str) -> bool:
    return make_url(database_url).get_backend_name() == "sqlite"


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine with a bounded connection pool.

    Requests wait at most ``db_pool_timeout`` seconds for a connection once
    ``db_pool_size + db_max_overflow`` connections are checked out; after that
    the checkout fails instead of queueing forever. SQLite keeps its default
    pool and gets foreign key enforcement switched on per connection.
    """

    if _is_sqlite(settings.database_url):
        engine = create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    logger.debug(
        "Creating database engine (pool_size=%s, max_overflow=%s, pool_timeout=%s)",
        settings.db_pool_size,
        settings.db_max_overflow,
        settings.db_pool_timeout,
    )
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from hr_api.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def session_scope(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "create_database_engine",
    "create_session_factory",
    "initialize_database",
    "session_scope",
]
