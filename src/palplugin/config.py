"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field

from palplugin.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "PluginSettings", "LoggingSettings", "ActionsSettings"]


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_start: bool = True
    log_end: bool = True
    log_errors: bool = True


class ActionsSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    disabled: list[str] = Field(default_factory=list)


class PluginSettings(BaseModel):
    """Schema of the plugin configuration file."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    actions: ActionsSettings = Field(default_factory=ActionsSettings)


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML, not a mapping, or fails validation.
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigNotFoundError(config_path=str(config_path))

        try:
            parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {config_path}", cause=e) from e

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {config_path}")

        try:
            settings = PluginSettings.model_validate(parsed)
        except pydantic.ValidationError as e:
            errors = [{"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]} for err in e.errors()]
            raise ConfigError(
                message=f"Invalid configuration in {config_path}",
                details={"errors": errors},
                cause=e,
            ) from e

        return cls(settings.model_dump())

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
