"""Environment-based configuration using pydantic-settings.

Example:
    >>> from warnlist.config import get_settings
    >>> get_settings().fatal_with_warnings
    False

    # Or with environment variables:
    # WARNLIST_FATAL_WITH_WARNINGS=true
    # WARNLIST_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WARNLIST_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["text", "json", "none"] = "text"
    colors: bool | None = Field(default=None, description="Force text-sink colors on/off; None auto-detects")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class WarnlistSettings(BaseSettings):
    """Root settings, loaded from ``WARNLIST_`` environment variables and ``.env``.

    Example environment variables:
        WARNLIST_FATAL_WITH_WARNINGS=true
        WARNLIST_LOG_LEVEL=DEBUG
        WARNLIST_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="WARNLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    fatal_with_warnings: bool = Field(
        default=False,
        description="Default for Collector.fatal_with_warnings: keep warnings alongside a fatal error",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> WarnlistSettings:
    """Get the global settings instance (cached)."""
    return WarnlistSettings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
