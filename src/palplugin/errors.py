"""Error hierarchy for the palplugin package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PluginError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "ActionNotFoundError",
    "ActionDisabledError",
    "ErrorCodes",
]


class PluginError(Exception):
    """Base error for all palplugin errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
        trace_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.trace_id = trace_id
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PluginError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PluginError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(PluginError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ActionNotFoundError(PluginError):
    """Raised when an action id is not registered."""

    def __init__(self, action_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="ACTION_NOT_FOUND",
            message=f"Action not found: {action_id}",
            details={"action_id": action_id},
            **kwargs,
        )

    @property
    def action_id(self) -> str:
        """The action id that was looked up."""
        return self.details["action_id"]


class ActionDisabledError(PluginError):
    """Raised when a disabled action is triggered."""

    def __init__(self, action_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="ACTION_DISABLED",
            message=f"Action is disabled by configuration: {action_id}",
            details={"action_id": action_id},
            **kwargs,
        )

    @property
    def action_id(self) -> str:
        """The disabled action id."""
        return self.details["action_id"]


class ErrorCodes:
    """String constants for every error code raised by palplugin."""

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    ACTION_NOT_FOUND = "ACTION_NOT_FOUND"
    ACTION_DISABLED = "ACTION_DISABLED"
