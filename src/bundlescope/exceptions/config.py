"""Configuration and input exceptions: settings and stats files."""

from pathlib import Path
from typing import Any

from .base import BundlescopeError


class ConfigurationError(BundlescopeError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class StatsFileError(ConfigurationError):
    """Raised when a stats or payload file cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read stats file: {path}", details={"path": str(path), "reason": reason}
        )
        self.path = path
        self.reason = reason


class OutputFileError(ConfigurationError):
    """Raised when a report or payload file cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot write {path}", details={"reason": reason})
        self.path = path
        self.reason = reason
