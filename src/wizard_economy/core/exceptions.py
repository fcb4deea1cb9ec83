"""Custom exception hierarchy for the wizard economy.

Two channels exist for things that go wrong. Expected outcomes such as
insufficient mana, an empty inventory or a dead actor are reported as a
``False`` return value and never raise. Contract violations (missing
references, negative amounts, out-of-range percentages, a trader trading
with itself) raise one of the exceptions below at the call site.

All exceptions inherit from WizardEconomyError, enabling unified error
handling at the application boundary while preserving call-site context.

Example:
    >>> from wizard_economy.core.exceptions import ContractViolationError
    >>> raise ContractViolationError("Amount must not be negative", argument="amount", value=-3)
"""

from __future__ import annotations

from typing import Any


class WizardEconomyError(Exception):
    """Base exception for all wizard economy errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Contract Violations
# =============================================================================


class ContractViolationError(WizardEconomyError, ValueError):
    """Raised when a caller breaks the precondition of an operation.

    This covers missing required references, negative amounts and
    percentages outside ``[0, 100]``. It subclasses ValueError so that
    callers can treat it alongside pydantic's construction-time
    ValidationError.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize contract violation with argument context.

        Args:
            message: Human-readable error description.
            argument: Name of the offending argument.
            value: The rejected value, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if argument:
            combined_details["argument"] = argument
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


class InvalidTradeError(ContractViolationError):
    """Raised when a give or purchase is attempted between invalid parties.

    This occurs when a participant is missing or when both sides of the
    trade are the same trader.
    """

    def __init__(
        self,
        message: str,
        *,
        role: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid trade error with participant context.

        Args:
            message: Human-readable error description.
            role: The trade role that was invalid (e.g. 'giver', 'buyer').
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if role:
            combined_details["role"] = role
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(WizardEconomyError):
    """Raised when application configuration is invalid.

    This includes invalid environment values or an unreadable .env file.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


def require(condition: bool, message: str, *, argument: str | None = None, value: Any | None = None) -> None:
    """Raise ContractViolationError unless ``condition`` holds.

    Args:
        condition: The precondition that must be true.
        message: Error message used when the precondition fails.
        argument: Name of the argument being checked.
        value: The value being checked.

    Raises:
        ContractViolationError: If ``condition`` is false.
    """
    if not condition:
        raise ContractViolationError(message, argument=argument, value=value)


__all__ = [
    "WizardEconomyError",
    "ContractViolationError",
    "InvalidTradeError",
    "ConfigurationError",
    "require",
]
