"""Tests for the self-validating domain entities."""

from __future__ import annotations

import dataclasses

import pytest

from hr_api.domain.entities import Credentials, Employee, Role
from hr_api.domain.exceptions import ValidationError


@pytest.mark.parametrize("name", ["Dev", "Developer", "  QA Lead  ", "x" * 64])
def test_role_accepts_names_within_bounds(name: str) -> None:
    role = Role.new(name)

    assert role.id is None
    assert role.name == name.strip()


@pytest.mark.parametrize("name", ["", "ab", "   ab   ", "x" * 65, None, 123, ["Developer"]])
def test_role_rejects_invalid_names(name) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Role.new(name)

    assert exc_info.value.detail["field"] == "name"


@pytest.mark.parametrize("value, expected", [(1, 1), ("7", 7), (42, 42)])
def test_role_reference_accepts_positive_integers(value, expected: int) -> None:
    assert Role.reference(value).id == expected


@pytest.mark.parametrize("value", [0, -3, 3.14, "abc", None, True, ""])
def test_role_reference_rejects_invalid_ids(value) -> None:
    with pytest.raises(ValidationError):
        Role.reference(value)


def test_role_is_immutable() -> None:
    role = Role(id=1, name="Developer")

    with pytest.raises(dataclasses.FrozenInstanceError):
        role.name = "Other"  # type: ignore[misc]


def _register(**overrides) -> Employee:
    values = {
        "name": "John Smith",
        "email": "john@example.com",
        "password": "Pass@123",
        "commutes_by_allowance": 1,
        "role": Role.reference(1),
    }
    values.update(overrides)
    return Employee.register(**values)


def test_employee_register_normalizes_fields() -> None:
    employee = _register(name="  John Smith ", email=" John@Example.COM ")

    assert employee.id is None
    assert employee.name == "John Smith"
    assert employee.email == "john@example.com"
    assert employee.password == "Pass@123"
    assert employee.role.id == 1


@pytest.mark.parametrize(
    "password",
    [
        "Pa@1",  # too short
        "pass@123",  # no uppercase
        "Pass@word",  # no digit
        "Pass1234",  # no special character
        "      ",
        None,
    ],
)
def test_employee_register_enforces_password_policy(password) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _register(password=password)

    assert exc_info.value.detail["field"] == "password"


@pytest.mark.parametrize("password", ["Pass@123", "A1!aaa", "Zz9{}zz", 'Q"1qqqq'])
def test_employee_register_accepts_policy_compliant_passwords(password: str) -> None:
    assert _register(password=password).password == password


@pytest.mark.parametrize("email", ["john", "john@", "john@example", "jo hn@example.com", ""])
def test_employee_rejects_invalid_email(email: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _register(email=email)

    assert exc_info.value.detail["field"] == "email"


@pytest.mark.parametrize("name", ["Al", "  ", 7])
def test_employee_rejects_short_names(name) -> None:
    with pytest.raises(ValidationError):
        _register(name=name)


@pytest.mark.parametrize("flag", [2, -1, True, "1", None])
def test_employee_rejects_invalid_commute_flag(flag) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _register(commutes_by_allowance=flag)

    assert exc_info.value.detail["field"] == "commutes_by_allowance"


@pytest.mark.parametrize("role", [None, 1, {"id": 1}, Role()])
def test_employee_requires_role_reference(role) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _register(role=role)

    assert exc_info.value.detail["field"] == "role"


def test_employee_loaded_from_store_skips_password_policy() -> None:
    employee = Employee(
        id=3,
        name="John Smith",
        email="john@example.com",
        commutes_by_allowance=0,
        role=Role(id=1, name="Developer"),
        password="$pbkdf2-sha256$1000$abc$def",
    )

    assert employee.id == 3
    assert "password" not in repr(employee)


def test_credentials_validate_email_and_password() -> None:
    credentials = Credentials(email=" JOHN@example.com", password="Pass@123")

    assert credentials.email == "john@example.com"
    with pytest.raises(ValidationError):
        Credentials(email="john@example.com", password="weak")
    with pytest.raises(ValidationError):
        Credentials(email="not-an-email", password="Pass@123")
