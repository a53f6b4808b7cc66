"""Configuration item descriptors.

A schema is an ordered list of ``ConfigItem`` instances supplied once by the
application. Each item names a key, its compiled-in default, an optional
explicit environment variable and an optional validator.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from configenv.core.exceptions import ConfigurationError, InvalidValueError
from configenv.core.result import Result

ENV_PREFIX = "CONFIG_"

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Receives the current value of an item, returns Success(value) or Failure(reason)
ConfigValidator = Callable[[str], Result[str, InvalidValueError]]


def derive_env_name(key: str) -> str:
    """Derive the environment variable name for a configuration key.

    Every character outside ``[a-z0-9]`` is replaced by an underscore before
    uppercasing, so ``db.connection-pool.size`` becomes
    ``CONFIG_DB_CONNECTION_POOL_SIZE``.
    """
    return ENV_PREFIX + _NON_ALNUM.sub("_", key).upper()


@dataclass(frozen=True)
class ConfigItem:
    """A single declared configuration key.

    Attributes:
        key: Unique, non-empty configuration key
        default: Compiled-in default, must be a string
        env_name: Explicit environment variable name, derived from key if empty
        validate: Optional validator run against the final merged value
        description: Free text for documentation purposes
    """
    key: str
    default: Any = ""
    env_name: Optional[str] = None
    validate: Optional[ConfigValidator] = None
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise ConfigurationError(f"Invalid configuration key: {self.key!r}")

    @property
    def resolved_env_name(self) -> str:
        """Environment variable consulted for this item."""
        return self.env_name or derive_env_name(self.key)


__all__ = ["ConfigItem", "ConfigValidator", "ENV_PREFIX", "derive_env_name"]
