"""Custom exception hierarchy for configenv."""
from __future__ import annotations

from typing import List, Optional


class ConfigEnvException(Exception):
    """Base exception for all configenv errors."""
    pass


class ConfigurationError(ConfigEnvException):
    """Raised when a configuration item descriptor is invalid."""
    pass


class SetupError(ConfigurationError):
    """Raised when the item list cannot be turned into default values."""
    pass


class ConfigFileError(ConfigEnvException):
    """Raised when the local configuration file cannot be read or parsed."""
    pass


class InvalidValueError(ConfigEnvException):
    """Raised (or carried in a Failure) when a single value fails validation."""
    pass


class ConfigValidationError(ConfigEnvException):
    """Raised when one or more configuration values failed to validate.

    Attributes:
        errors: The individual validation failures, in item order
    """

    def __init__(self, message: str, errors: Optional[List[Exception]] = None):
        super().__init__(message)
        self.errors: List[Exception] = list(errors or [])
