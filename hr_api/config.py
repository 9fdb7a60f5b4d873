"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="Algorithm used to sign access tokens",
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    db_pool_size: int = Field(
        default=10,
        description="Connections kept open in the database pool",
        gt=0,
    )
    db_max_overflow: int = Field(
        default=10,
        description="Extra connections allowed once the pool is exhausted",
        ge=0,
    )
    db_pool_timeout: int = Field(
        default=30,
        description="Seconds a request waits for a free connection before failing",
        gt=0,
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported LOG_LEVEL: {value}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
