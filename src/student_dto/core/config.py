"""
Core configuration module for the student DTO service.

This module defines all configuration settings for the application using Pydantic Settings.
Configuration values are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or a .env file.
    The settings are validated using Pydantic's type system.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="Student DTO Service", description="Application name")
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode flag")

    # Database Settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./students.db",
        description="Async SQLAlchemy connection URL",
    )
    database_echo: bool = Field(
        default=False, description="Echo SQL queries (useful for debugging)"
    )
    database_pool_size: int = Field(
        default=5, description="Database connection pool size"
    )
    database_max_overflow: int = Field(
        default=10, description="Maximum overflow connections for database pool"
    )

    # Logging Settings
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(
        default=False, description="Render log records as JSON instead of console text"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
