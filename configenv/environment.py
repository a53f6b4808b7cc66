"""Environment variable overlay for schema items."""
from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional

from loguru import logger

from configenv.schema import ConfigItem
from configenv.store import ValueStore


def read_env(
    items: Iterable[ConfigItem],
    store: ValueStore,
    environ: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Overlay environment variable values for every schema item.

    A variable that is set, even to an empty string, replaces the current
    value. Unset variables leave the default or file value in place.

    Args:
        items: Schema items, only their keys are ever written
        store: Value store to update
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        Keys that were overridden from the environment
    """
    env = os.environ if environ is None else environ
    overridden: List[str] = []
    for item in items:
        env_name = item.resolved_env_name
        if env_name in env:
            store.set(item.key, env[env_name])
            overridden.append(item.key)
            logger.debug(f"Configuration key {item.key} set from environment variable {env_name}")
    return overridden


__all__ = ["read_env"]
