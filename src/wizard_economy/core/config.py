"""Configuration management for the wizard economy.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from wizard_economy.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Environment Variables:
    WIZARD_ECONOMY_APP_NAME: Application name attached to log events
    WIZARD_ECONOMY_DEBUG: Force DEBUG logging
    WIZARD_ECONOMY_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WIZARD_ECONOMY_JSON_LOGS: Emit JSON log lines instead of console output
    WIZARD_ECONOMY_RANDOM_SEED: Seed for the default random selector
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wizard_economy.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name attached to every log event.
        debug: Log at DEBUG level regardless of log_level.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        random_seed: Seed used by wizards' default random selectors.
            None draws from system entropy.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIZARD_ECONOMY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="wizard_economy",
        description="Application name attached to every log event",
    )
    debug: bool = Field(
        default=False,
        description="Log at DEBUG level regardless of log_level",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the default random selector",
    )

    @property
    def effective_log_level(self) -> str:
        """Get the level logging is configured with.

        Returns:
            DEBUG in debug mode, otherwise ``log_level``.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
