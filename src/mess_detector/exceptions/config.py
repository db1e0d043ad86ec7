"""Configuration exceptions: filter patterns and settings."""

from typing import Any

from .base import MessDetectorError


class ConfigurationError(MessDetectorError):
    """Base class for configuration-related errors."""

    pass


class InvalidPatternError(ConfigurationError):
    """Raised when an include/exclude glob cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            f"Invalid file pattern: {pattern!r}",
            details={"pattern": pattern, "reason": reason},
        )
        self.pattern = pattern
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
