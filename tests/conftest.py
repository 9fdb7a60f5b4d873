"""Shared fixtures for the API test-suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402
from passlib.context import CryptContext  # noqa: E402

TEST_DB_PATH = Path(tempfile.gettempdir()) / "hr_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from hr_api.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from hr_api.infrastructure import security  # noqa: E402
from hr_api.infrastructure.database import Base, initialize_database  # noqa: E402
from hr_api.infrastructure.models import EmployeeModel, RoleModel  # noqa: E402
from main import create_app  # noqa: E402

DEFAULT_PASSWORD = "Pass@123"


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep pbkdf2 hashing cheap during tests."""

    monkeypatch.setattr(
        security,
        "pwd_context",
        CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__rounds=1_000),
    )


@pytest.fixture()
def app():
    """Return an application bound to an empty database."""

    application = create_app()
    engine = application.state.context.engine
    Base.metadata.drop_all(bind=engine)
    initialize_database(engine)
    yield application
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def session(app):
    db = app.state.context.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def token_service(app) -> security.TokenService:
    return app.state.context.token_service


@pytest.fixture()
def auth_headers(token_service) -> dict[str, str]:
    token = token_service.issue(
        {"email": "admin@example.com", "name": "Admin", "role": "Administrator", "id": 1}
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_role(session):
    """Insert a role row directly and return its id."""

    def _make_role(name: str = "Developer") -> int:
        role = RoleModel(name=name)
        session.add(role)
        session.commit()
        session.refresh(role)
        return role.id

    return _make_role


@pytest.fixture()
def make_employee(session, make_role):
    """Insert an employee row with a hashed password and return its id."""

    def _make_employee(
        *,
        email: str = "john@example.com",
        password: str = DEFAULT_PASSWORD,
        name: str = "John Smith",
        role_id: int | None = None,
    ) -> int:
        if role_id is None:
            role_id = make_role()
        employee = EmployeeModel(
            name=name,
            email=email,
            password=security.get_password_hash(password),
            commutes_by_allowance=1,
            role_id=role_id,
        )
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return employee.id

    return _make_employee
