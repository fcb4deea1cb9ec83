"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        WizardEconomyError: Base exception for all application errors.
        ContractViolationError: Broken call-site preconditions.
        InvalidTradeError: Missing or identical trade participants.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from wizard_economy.core.config import (
    Settings,
    clear_settings_cache,
    get_settings,
)
from wizard_economy.core.exceptions import (
    ConfigurationError,
    ContractViolationError,
    InvalidTradeError,
    WizardEconomyError,
    require,
)
from wizard_economy.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "WizardEconomyError",
    "ContractViolationError",
    "InvalidTradeError",
    "ConfigurationError",
    "require",
    # Configuration
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
