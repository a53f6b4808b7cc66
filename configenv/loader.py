"""Local configuration file loading.

The local configuration file is a flat YAML mapping from configuration key to
value. Scalars are read as text exactly as written (``port: 8080`` yields
``"8080"``), except plain nulls (``~``, ``null``) which yield ``""``. Nested
mappings and sequences are rejected.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Collection, Dict, List, Optional, Union

import yaml
from loguru import logger

from configenv.core.exceptions import ConfigFileError
from configenv.store import ValueStore

LOCAL_CONFIG_FILE_NAME = "local-config.yaml"

# plain scalars YAML resolves to null
_NULL = re.compile(r"^(?:~|null|Null|NULL|)$")

PathLike = Union[str, Path]


def read_flat_yaml(path: PathLike) -> Optional[Dict[str, str]]:
    """Read and parse a flat YAML configuration file.

    Args:
        path: Location of the file

    Returns:
        Mapping of keys to string values in file order, or None if the file
        does not exist

    Raises:
        ConfigFileError: If the file exists but cannot be read or is not a
            flat string mapping
    """
    file_path = Path(path)
    try:
        file_path.stat()
    except (FileNotFoundError, NotADirectoryError):
        # this is NOT an error
        logger.debug(f"No local configuration file at {file_path}, skipping")
        return None
    except OSError as e:
        raise ConfigFileError(
            f"error reading local configuration yaml file {file_path}: {e}"
        ) from e

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            f"error reading local configuration yaml file {file_path}: {e}"
        ) from e

    try:
        return parse_flat_yaml(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigFileError(
            f"error parsing local configuration flat yaml file {file_path} "
            f"(both keys and values must be strings): {e}"
        ) from e


def parse_flat_yaml(text: str) -> Dict[str, str]:
    """Parse YAML text that must hold a single flat mapping of scalars.

    Raises:
        yaml.YAMLError: On YAML syntax errors
        ValueError: If the document is not a flat mapping or repeats a key
    """
    root = yaml.compose(text, Loader=yaml.BaseLoader)
    if root is None:
        return {}
    if not isinstance(root, yaml.MappingNode):
        raise ValueError(f"expected a mapping at top level, found {root.id}")

    values: Dict[str, str] = {}
    for key_node, value_node in root.value:
        if not isinstance(key_node, yaml.ScalarNode):
            raise ValueError(f"line {key_node.start_mark.line + 1}: key must be a string")
        key = key_node.value
        if not isinstance(value_node, yaml.ScalarNode):
            raise ValueError(
                f"line {value_node.start_mark.line + 1}: value for key {key} must be a string, "
                f"found {value_node.id}"
            )
        if key in values:
            raise ValueError(f"line {key_node.start_mark.line + 1}: key {key} already set")
        if value_node.style is None and _NULL.match(value_node.value):
            values[key] = ""
        else:
            values[key] = value_node.value
    return values


def merge_file_values(
    values: Dict[str, str],
    known_keys: Collection[str],
    store: ValueStore,
    strict_unknown_keys: bool = False,
) -> List[str]:
    """Overlay file values onto the store.

    Keys not in ``known_keys`` are merged as well and returned so they can be
    reported later. With ``strict_unknown_keys`` the first unknown key aborts
    the merge before anything is written.

    Returns:
        Unknown keys in file order
    """
    unknown = [key for key in values if key not in known_keys]
    if unknown and strict_unknown_keys:
        raise ConfigFileError(
            f"local configuration file contained setting for unknown configuration key "
            f"{unknown[0]}, bailing out"
        )

    store.update(values)
    return unknown


__all__ = ["LOCAL_CONFIG_FILE_NAME", "read_flat_yaml", "parse_flat_yaml", "merge_file_values"]
