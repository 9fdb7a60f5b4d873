"""Security helpers for password hashing and access tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from hr_api.config import Settings

# ---- Password hashing (passlib) ----
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash passlib recognizes.
        return False


# ---- JWT ----
IDENTITY_CLAIMS = ("email", "name", "role", "id")
BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class TokenValidation:
    """Outcome of validating an ``Authorization`` header."""

    is_valid: bool
    claims: dict[str, Any] = field(default_factory=dict)
    refreshed_token: str | None = None

    @classmethod
    def rejected(cls) -> "TokenValidation":
        return cls(is_valid=False)


class TokenService:
    """Issue, verify and refresh signed access tokens.

    Tokens are stateless: every successful :meth:`validate` returns a freshly
    issued token so that each authenticated request extends the session.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(minutes=60),
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
            expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, claims: dict[str, Any], expires_delta: timedelta | None = None) -> str:
        expire = datetime.now(timezone.utc) + (expires_delta or self.expires_delta)
        return jwt.encode(
            {**claims, "exp": expire}, self._secret_key, algorithm=self._algorithm
        )

    def verify(self, token: str) -> dict[str, Any] | None:
        """Return the decoded claims, or ``None`` when the token is not valid."""

        if not token:
            return None
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            return None

    def refresh(self, claims: dict[str, Any]) -> str:
        identity = {key: claims[key] for key in IDENTITY_CLAIMS if key in claims}
        return self.issue(identity)

    def validate(self, authorization: str | None) -> TokenValidation:
        """Validate a raw ``Authorization`` header value.

        Accepts ``Bearer <token>`` or a bare token. Every failure, including a
        missing or malformed header, yields a rejected result instead of an
        exception.
        """

        token = self.extract_token(authorization)
        if token is None:
            return TokenValidation.rejected()

        claims = self.verify(token)
        if claims is None:
            return TokenValidation.rejected()

        return TokenValidation(
            is_valid=True,
            claims=claims,
            refreshed_token=self.refresh(claims),
        )

    @staticmethod
    def extract_token(authorization: str | None) -> str | None:
        if not authorization or not isinstance(authorization, str):
            return None

        parts = authorization.strip().split()
        if len(parts) == 1:
            return parts[0]
        if len(parts) == 2 and parts[0].lower() == BEARER_SCHEME:
            return parts[1]
        return None


__all__ = [
    "IDENTITY_CLAIMS",
    "TokenService",
    "TokenValidation",
    "get_password_hash",
    "pwd_context",
    "verify_password",
]
