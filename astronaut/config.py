"""
Configuration settings for astronaut.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be set through an ``ASTRONAUT_``-prefixed environment variable,
e.g. ``ASTRONAUT_HOME=/tmp/deck astronaut review``.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_FILENAME = "cards.db"

# Ten years
MAX_BASE_INTERVAL_MS = 3_650 * 86_400_000


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASTRONAUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    home: Path = Field(
        default_factory=lambda: Path.home() / ".astronaut",
        description="Directory holding the card database",
    )
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL; defaults to sqlite:///<home>/cards.db",
    )
    echo_sql: bool = Field(
        default=False,
        description="Echo SQL statements issued by the engine",
    )

    # ========================================
    # Scheduling
    # ========================================
    base_interval_ms: int = Field(
        default=86_400_000,
        gt=0,
        le=MAX_BASE_INTERVAL_MS,
        description="Base review delay (one day) scaled by the interval function",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_database_path(self) -> Path:
        """Path of the default SQLite database file."""
        return self.home.expanduser() / DATABASE_FILENAME

    def get_database_url(self) -> str:
        """Effective database URL."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.get_database_path()}"

    def uses_default_database(self) -> bool:
        """True when the database lives in the home directory file."""
        return not self.database_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
