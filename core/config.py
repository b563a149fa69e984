"""
Application configuration using Pydantic Settings.

This module provides typed and validated settings for the application,
with support for environment variables and .env files.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    # Support both DATABASE_URL and individual parameters
    url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full database URL (takes precedence over individual params)",
    )

    name: str = Field(default="semly_admin", description="Database name")
    user: str = Field(default="postgres", description="Database user")
    password: SecretStr = Field(default=SecretStr("postgres"), description="Database password")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port", ge=1, le=65535)

    @property
    def connection_url(self) -> str:
        """Get database connection URL, preferring DATABASE_URL."""
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    @property
    def safe_url(self) -> str:
        """Get database URL without password for logging."""
        if self.url:
            parsed = urlparse(self.url)
            if parsed.password:
                return self.url.replace(f":{parsed.password}@", ":***@")
            return self.url
        return f"postgresql://{self.user}@{self.host}:{self.port}/{self.name}"


class RedisSettings(BaseSettings):
    """Redis connection settings."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")


class AdminSettings(BaseSettings):
    """Back-office access settings."""

    model_config = SettingsConfigDict(env_prefix="ADMIN_")

    user_ids: str = Field(
        default="",
        description="Comma-separated identity-provider user IDs allowed into the admin API",
    )

    @property
    def allowed_user_ids(self) -> frozenset[str]:
        """Parsed allow-list."""
        return frozenset(uid.strip() for uid in self.user_ids.split(",") if uid.strip())

    def is_admin(self, user_id: str | None) -> bool:
        """Check if ``user_id`` is on the allow-list."""
        if not user_id:
            return False
        return user_id.strip() in self.allowed_user_ids


class GSTSettings(BaseSettings):
    """Defaults applied to new merchant GST configurations."""

    model_config = SettingsConfigDict(env_prefix="GST_")

    default_rate: Decimal = Field(
        default=Decimal("18"),
        ge=0,
        le=100,
        description="Default GST rate percentage",
    )
    default_sac_code: str = Field(default="998314", description="Default SAC code (SaaS)")


class RateLimitSettings(BaseSettings):
    """API rate limiting settings."""

    model_config = SettingsConfigDict(env_prefix="RATE_LIMIT_")

    enabled: bool = Field(default=True, description="Apply rate limiting to the admin API")
    requests: int = Field(default=100, ge=1, description="Requests allowed per window")
    window_seconds: int = Field(default=60, ge=1, description="Window length in seconds")


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides environment-specific
    settings loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: SecretStr = Field(
        default=SecretStr("django-insecure-change-me-in-production"),
        description="Django secret key",
    )
    allowed_hosts: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Allowed hosts",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")

    # Sub-settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    admin: AdminSettings = Field(default_factory=AdminSettings)
    gst: GSTSettings = Field(default_factory=GSTSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def parse_allowed_hosts(cls, v: str | list[str]) -> list[str]:
        """Parse allowed hosts from comma-separated string or list."""
        if isinstance(v, str):
            return [h.strip() for h in v.split(",") if h.strip()]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Configured Settings instance.
    """
    return Settings()
