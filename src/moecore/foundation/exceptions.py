"""
moecore exception hierarchy.

All errors are configuration or programmer errors detected at setup time.
Every moecore exception inherits from MOECoreError so callers can catch
them in one place.

Example:
    try:
        params = ArrayOptimizerParams(100, "1/2", "3/10", evaluator)
    except MOECoreError as e:
        print(f"Setup failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOECoreError(Exception):
    """
    Base exception for all moecore errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg

    def __str__(self) -> str:
        return self._format_message()


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOECoreError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidConfigurationError(ConfigurationError, ValueError):
    """Raised for degenerate settings: bounds, lengths, sizes or rates."""

    def __init__(self, message: str, suggestion: str | None = None, **details: Any) -> None:
        super().__init__(message, suggestion, details)


class DimensionMismatchError(ConfigurationError, ValueError):
    """Raised when declared vector lengths disagree with the vectors actually used."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        suggestion = "Check x_len() and objectives_len() against what calculate_objectives reads and writes"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, fields: list[str], config_class: str | None = None) -> None:
        joined = ", ".join(f"'{f}'" for f in fields)
        message = f"Missing required configuration: {joined}."
        suggestion = "Set every required field before calling fixed()"
        if config_class:
            suggestion = f"Set every required field on {config_class} before calling fixed()"
        super().__init__(message, suggestion, {"fields": list(fields)})


class OptimizerNotFoundError(ConfigurationError, KeyError):
    """Raised when an unknown optimizer name is requested."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        available = available or []
        message = f"Unknown optimizer '{name}'."
        if available:
            suggestion = f"Available optimizers: {', '.join(available)}"
        else:
            suggestion = "No optimizers are registered. Use register_optimizer() first."
        super().__init__(message, suggestion, {"name": name, "available": available})


# =============================================================================
# Pool Errors
# =============================================================================


class PoolMisuseError(MOECoreError, ValueError):
    """Raised when a value handed back to a pool was not issued by it."""

    def __init__(self, message: str, **details: Any) -> None:
        suggestion = "Only deallocate values obtained from this pool's allocate() or clone(), and only once"
        super().__init__(message, suggestion, details)


__all__ = [
    "MOECoreError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "DimensionMismatchError",
    "MissingConfigError",
    "OptimizerNotFoundError",
    "PoolMisuseError",
]
