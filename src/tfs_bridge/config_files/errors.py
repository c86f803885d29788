"""Errors raised while loading bridge configuration files."""

from __future__ import annotations

from typing import Any


class TfsBridgeConfigError(Exception):
    """Base error for configuration file failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ConfigurationNotFoundError(TfsBridgeConfigError):
    """An explicitly supplied configuration file does not exist."""


class ConfigParseError(TfsBridgeConfigError):
    """A configuration file exists but could not be read or parsed."""


class MappingParseError(ConfigParseError):
    pass


class ExclusionParseError(ConfigParseError):
    pass
