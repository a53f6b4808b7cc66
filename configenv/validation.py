"""Generators for common configuration validators.

Each ``obtain_*`` function returns a ``ConfigValidator``: a callable that
receives the current value of an item and returns ``Success(value)`` or
``Failure(InvalidValueError)``. Validators never touch the value store.

Example:
    ConfigItem(
        key="server.port",
        default="8080",
        validate=obtain_uint_range_validator(1024, 65535),
    )
"""
from __future__ import annotations

import re

from configenv.core.error_handler import as_result
from configenv.core.exceptions import InvalidValueError
from configenv.schema import ConfigValidator

_INTEGER = re.compile(r"[+-]?[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_LITERALS = frozenset({"0", "f", "false", "n", "no", "off"})

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


# --- conversion helpers ---

def a_to_int(s: str) -> int:
    """Strictly parse a base-10 integer.

    Only an optional sign followed by ASCII digits is accepted, so surrounding
    whitespace, underscores and embedded text are all rejected. Values must fit
    in a signed 64-bit integer.
    """
    if not _INTEGER.fullmatch(s):
        raise InvalidValueError(f"value {s} is not a valid integer: invalid syntax")
    digits = s.lstrip("+-").lstrip("0")
    sign = "-" if s.startswith("-") else ""
    value = int(sign + (digits or "0")) if len(digits) <= 19 else None
    if value is None or value < INT_MIN or value > INT_MAX:
        raise InvalidValueError(f"value {s} is not a valid integer: value out of range")
    return value


def a_to_uint(s: str) -> int:
    """Strictly parse a non-negative base-10 integer."""
    value = a_to_int(s)
    if value < 0:
        raise InvalidValueError(f"value {s} is negative")
    return value


def parse_bool(s: str) -> bool:
    """Parse a boolean literal, case-insensitively."""
    lowered = s.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise InvalidValueError(f"value {s} is not a valid boolean value")


# --- generators for common validation functions ---

def obtain_pattern_validator(pattern: str) -> ConfigValidator:
    """Value must contain a match for ``pattern``; anchor it to match fully."""
    @as_result
    def validate(value: str) -> str:
        try:
            matched = re.search(pattern, value)
        except re.error as e:
            raise InvalidValueError(f"invalid pattern {pattern}: {e}") from e
        if matched is None:
            raise InvalidValueError(f"must match {pattern}")
        return value
    return validate


def obtain_not_empty_validator() -> ConfigValidator:
    @as_result
    def validate(value: str) -> str:
        if value == "":
            raise InvalidValueError("must not be empty")
        return value
    return validate


def obtain_uint_range_validator(min_value: int, max_value: int) -> ConfigValidator:
    """Value must be a non-negative integer within ``[min_value..max_value]``."""
    @as_result
    def validate(value: str) -> str:
        parsed = a_to_uint(value)
        if parsed < min_value or parsed > max_value:
            raise InvalidValueError(f"value {value} is out of range [{min_value}..{max_value}]")
        return value
    return validate


def obtain_int_range_validator(min_value: int, max_value: int) -> ConfigValidator:
    """Value must be an integer within ``[min_value..max_value]``."""
    @as_result
    def validate(value: str) -> str:
        parsed = a_to_int(value)
        if parsed < min_value or parsed > max_value:
            raise InvalidValueError(f"value {value} is out of range [{min_value}..{max_value}]")
        return value
    return validate


def obtain_is_boolean_validator() -> ConfigValidator:
    @as_result
    def validate(value: str) -> str:
        parse_bool(value)
        return value
    return validate


def obtain_is_regex_validator() -> ConfigValidator:
    @as_result
    def validate(value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise InvalidValueError(f"value {value} is not a valid regex pattern") from e
        return value
    return validate


def obtain_single_character_validator() -> ConfigValidator:
    @as_result
    def validate(value: str) -> str:
        if len(value) < 1:
            raise InvalidValueError("cannot be empty")
        if len(value) > 1:
            raise InvalidValueError("cannot consist of multiple characters")
        return value
    return validate


__all__ = [
    "a_to_int",
    "a_to_uint",
    "parse_bool",
    "obtain_pattern_validator",
    "obtain_not_empty_validator",
    "obtain_uint_range_validator",
    "obtain_int_range_validator",
    "obtain_is_boolean_validator",
    "obtain_is_regex_validator",
    "obtain_single_character_validator",
]
