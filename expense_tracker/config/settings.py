"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The storage location is read once and handed to the storage layer
at construction, so nothing else in the package reaches for a global path.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local JSON storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_file: Path = Field(
        default=Path("expenses.json"),
        description="Path to the JSON file holding all expenses"
    )
    tolerate_corrupt_storage: bool = Field(
        default=False,
        description=(
            "Treat an unreadable data file as empty instead of failing. "
            "The next write will replace the corrupt file."
        )
    )

    @field_validator('data_file')
    @classmethod
    def expand_data_file(cls, v: Path) -> Path:
        """Expand ~ so the path can be given as ~/expenses.json."""
        return v.expanduser()


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for the structured audit log on stderr"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol shown in front of totals (display only)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
