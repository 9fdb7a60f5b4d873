"""Tests for password hashing and the token service."""

from __future__ import annotations

from datetime import timedelta

import pytest

from hr_api.infrastructure.security import (
    TokenService,
    get_password_hash,
    verify_password,
)

CLAIMS = {"email": "john@example.com", "name": "John Smith", "role": "Developer", "id": 1}


@pytest.fixture()
def service() -> TokenService:
    return TokenService("unit-secret", expires_delta=timedelta(minutes=5))


def test_password_hash_is_not_the_secret() -> None:
    hashed = get_password_hash("Pass@123")

    assert hashed != "Pass@123"
    assert verify_password("Pass@123", hashed)
    assert not verify_password("Wrong@123", hashed)


@pytest.mark.parametrize("stored", [None, "", "plain-text-value"])
def test_verify_password_rejects_unusable_hashes(stored) -> None:
    assert verify_password("Pass@123", stored) is False


def test_issue_then_verify_returns_claims(service: TokenService) -> None:
    token = service.issue(CLAIMS)

    decoded = service.verify(token)

    assert decoded is not None
    for key, value in CLAIMS.items():
        assert decoded[key] == value
    assert "exp" in decoded


def test_verify_rejects_token_signed_with_other_secret(service: TokenService) -> None:
    foreign = TokenService("another-secret").issue(CLAIMS)

    assert service.verify(foreign) is None


def test_verify_rejects_expired_token(service: TokenService) -> None:
    expired = service.issue(CLAIMS, expires_delta=timedelta(seconds=-1))

    assert service.verify(expired) is None


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "Basic abc", "Bearer a b", "not-a-jwt", "Bearer not-a-jwt"],
)
def test_validate_never_raises_on_malformed_headers(service: TokenService, header) -> None:
    result = service.validate(header)

    assert result.is_valid is False
    assert result.claims == {}
    assert result.refreshed_token is None


@pytest.mark.parametrize("template", ["Bearer {}", "bearer {}", "{}", "  Bearer   {}  "])
def test_validate_accepts_bearer_and_bare_tokens(service: TokenService, template: str) -> None:
    token = service.issue(CLAIMS)

    result = service.validate(template.format(token))

    assert result.is_valid is True
    assert result.claims["email"] == CLAIMS["email"]
    assert result.refreshed_token


def test_refreshed_token_carries_identity_claims(service: TokenService) -> None:
    token = service.issue({**CLAIMS, "extra": "dropped"})

    result = service.validate(f"Bearer {token}")
    refreshed = service.verify(result.refreshed_token)

    assert refreshed is not None
    assert {key: refreshed[key] for key in CLAIMS} == CLAIMS
    assert "extra" not in refreshed


def test_validate_rejects_expired_token(service: TokenService) -> None:
    expired = service.issue(CLAIMS, expires_delta=timedelta(seconds=-1))

    assert service.validate(f"Bearer {expired}").is_valid is False
