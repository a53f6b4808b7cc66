"""Configuration context: defaults, local file, environment, validation.

Values are layered with the following precedence:
1. Default values from the item list (lowest priority)
2. Local flat YAML configuration file
3. Environment variables (highest priority)

Every value is kept as a string. Validators check the merged result once
loading is complete.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from loguru import logger

from configenv.core.error_handler import as_result
from configenv.core.exceptions import ConfigValidationError, SetupError
from configenv.environment import read_env
from configenv.loader import LOCAL_CONFIG_FILE_NAME, merge_file_values, read_flat_yaml
from configenv.schema import ConfigItem
from configenv.store import ValueStore

WarnFunc = Callable[[str], None]


def _log_warning(message: str) -> None:
    logger.warning(message)


class ConfigEnv:
    """A single configuration: item list, current values and warn sink.

    Example:
        config = ConfigEnv(items)
        config.read()
        config.validate()
        port = config.get("server.port")

    Attributes:
        config_file_name: File used by ``read()`` when no path is given
        strict_unknown_keys: Reject unknown file keys instead of warning
    """

    def __init__(
        self,
        items: Iterable[ConfigItem],
        warn: Optional[WarnFunc] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        config_file_name: Union[str, Path] = LOCAL_CONFIG_FILE_NAME,
        strict_unknown_keys: bool = False,
    ):
        self._warn: WarnFunc = warn or _log_warning
        self._environ = environ
        self.config_file_name = config_file_name
        self.strict_unknown_keys = strict_unknown_keys
        self._items: Tuple[ConfigItem, ...] = ()
        self._store = ValueStore()
        self._unknown_keys: List[str] = []
        self.setup(items)

    # --- setup ---

    def setup(self, items: Iterable[ConfigItem]) -> None:
        """(Re)initialize the store with the default value of every item.

        All defaults are checked before anything is written, so a failure
        leaves the previous state in place.

        Raises:
            SetupError: If a default is not a string or a key is repeated
        """
        items = tuple(items)
        defaults: Dict[str, str] = {}
        for it in items:
            if not isinstance(it.default, str):
                raise SetupError(
                    f"error parsing default value for key {it.key} - this library only supports strings"
                )
            if it.key in defaults:
                raise SetupError(f"configuration key {it.key} is declared more than once")
            defaults[it.key] = it.default

        self._items = items
        self._store = ValueStore(defaults)
        self._unknown_keys = []
        logger.debug(f"Configuration initialized with {len(items)} item(s)")

    @property
    def items(self) -> Tuple[ConfigItem, ...]:
        return self._items

    @property
    def unknown_keys(self) -> List[str]:
        """Keys found in the local file that no item declares."""
        return list(self._unknown_keys)

    # --- loading ---

    def read(self, path: Optional[Union[str, Path]] = None) -> None:
        """Read the local configuration file, then the environment."""
        self.read_file(path if path is not None else self.config_file_name)
        self.read_env()

    def read_file(self, path: Union[str, Path]) -> None:
        """Overlay values from a flat YAML file, ignoring the environment.

        A missing file is not an error.

        Raises:
            ConfigFileError: If the file cannot be read or parsed, or holds
                an unknown key while ``strict_unknown_keys`` is set
        """
        values = read_flat_yaml(path)
        if values is None:
            return

        known = {it.key for it in self._items}
        unknown = merge_file_values(values, known, self._store, self.strict_unknown_keys)
        for key in unknown:
            if key not in self._unknown_keys:
                self._unknown_keys.append(key)
        logger.info(f"Loaded {len(values)} value(s) from local configuration file {path}")

    def read_env(self) -> None:
        """Overlay values from environment variables for every item."""
        overridden = read_env(self._items, self._store, self._environ)
        if overridden:
            logger.info(f"Loaded {len(overridden)} value(s) from environment variables")

    # --- validation ---

    def validate(self) -> None:
        """Warn about unknown keys and run every item's validator.

        Each failure is reported through the warn function as it is found.

        Raises:
            ConfigValidationError: If at least one value failed to validate
        """
        for key in self._unknown_keys:
            self._warn(f"local configuration file contained setting for unknown configuration key {key}")

        errors: List[Exception] = []
        for it in self._items:
            if it.validate is None:
                continue
            result = as_result(it.validate)(self._store.get(it.key))
            if result.is_failure():
                self._warn(
                    f"failed to validate configuration field {it.key} ({it.resolved_env_name}): {result.error}"
                )
                errors.append(result.error)

        if errors:
            raise ConfigValidationError(
                f"some configuration values failed to validate or parse. "
                f"There were {len(errors)} error(s). See details above",
                errors,
            )

    # --- accessors ---

    def get(self, key: str, default: str = "") -> str:
        """Current value of ``key``, or ``default`` if it was never set."""
        return self._store.get(key, default)

    def lookup(self, key: str) -> Tuple[str, bool]:
        """Current value of ``key`` and whether it is set at all."""
        return self._store.lookup(key)

    def set(self, key: str, value: str) -> None:
        self._store.set(key, value)

    def keys(self) -> List[str]:
        return self._store.keys()

    def to_dict(self) -> Dict[str, str]:
        """Snapshot of all current values."""
        return self._store.to_dict()

    def __contains__(self, key: object) -> bool:
        return key in self._store


def load_config(
    items: Iterable[ConfigItem],
    path: Optional[Union[str, Path]] = None,
    warn: Optional[WarnFunc] = None,
    **kwargs,
) -> ConfigEnv:
    """Set up, read and validate a configuration in one call.

    Convenience function for the usual startup sequence.

    Args:
        items: Configuration item list
        path: Local configuration file, defaults to ``local-config.yaml``
        warn: Warning sink, defaults to the loguru logger
        **kwargs: Passed on to ``ConfigEnv``

    Returns:
        The loaded and validated ConfigEnv

    Raises:
        SetupError: On invalid defaults
        ConfigFileError: On unreadable or malformed local files
        ConfigValidationError: If any value fails to validate
    """
    config = ConfigEnv(items, warn, **kwargs)
    config.read(path)
    config.validate()
    return config


__all__ = ["ConfigEnv", "WarnFunc", "load_config"]
