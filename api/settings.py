"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing, validation,
and sensible defaults. Settings are loaded once at startup and cached.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults for local development.
    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Document Store ===
    pocketbase_url: str = Field(
        default="http://127.0.0.1:8090",
        description="PocketBase server URL holding the registration records",
    )
    pocketbase_admin_email: str = Field(
        default="",
        description="Optional PocketBase superuser email; authenticates on connect when set",
    )
    pocketbase_admin_password: str = Field(
        default="",
        description="Optional PocketBase superuser password",
    )
    registrations_collection: str = Field(
        default="registrations",
        description="Collection holding registration records",
    )
    skip_store_connect: bool = Field(
        default=False,
        description="Skip connecting to the store on startup (for testing)",
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins for the admin view (comma-separated)",
    )

    # === Report ===
    fest_name: str = Field(
        default="IT Fest",
        description="Fest name printed under the report title",
    )

    @field_validator("registrations_collection", mode="after")
    @classmethod
    def validate_collection(cls, v: str) -> str:
        """Reject a blank collection name."""
        v = v.strip()
        if not v:
            raise ValueError("REGISTRATIONS_COLLECTION must not be blank")
        return v

    @model_validator(mode="after")
    def warn_missing_password(self) -> Settings:
        """Warn when an admin email is configured without a password."""
        if self.pocketbase_admin_email and not self.pocketbase_admin_password:
            logger.warning(
                "POCKETBASE_ADMIN_EMAIL is set but POCKETBASE_ADMIN_PASSWORD is not; "
                "the store will be accessed without superuser authentication."
            )
        return self

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    """
    return Settings()
