"""
Configuration management for the Avatar Registry API.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Avatar Registry API"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Avatar Store Backend Selection
    AVATAR_STORE_BACKEND: Literal["memory", "database", "http"] = "memory"

    # Database store (PostgreSQL when DATABASE_URL is set)
    DATABASE_URL: str | None = None

    # SQLite fallback for local development
    USE_SQLITE_FALLBACK: bool = True
    SQLITE_FALLBACK_URL: str = "sqlite+aiosqlite:///./avatars_dev.db"

    # Remote avatar API store
    AVATAR_API_URL: str = "http://localhost:5000/api"
    AVATAR_API_TIMEOUT: float = 10.0

    # Default GLB assets for presets, served as {base}/{avatarType}.glb
    AVATAR_ASSET_BASE_URL: str = "/models"

    # Soft-delete policy: when enabled, inactive avatars read as absent
    # and creating over one reactivates it
    HIDE_INACTIVE_AVATARS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
