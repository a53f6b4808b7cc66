"""configenv: string configuration from defaults, a local file and the environment.

Provides a small configuration system with support for:
- Compiled-in defaults declared as an ordered item list
- A flat local YAML file overriding the defaults
- Environment variables overriding both
- Per-item validators reporting through an injectable warn function

Main components:
- config.py: ConfigEnv context and load_config
- schema.py: ConfigItem descriptors and environment name derivation
- loader.py: local file parsing and merging
- environment.py: environment overlay
- validation.py: validator generators
"""
from configenv.config import ConfigEnv, WarnFunc, load_config
from configenv.core.exceptions import (
    ConfigEnvException,
    ConfigFileError,
    ConfigurationError,
    ConfigValidationError,
    InvalidValueError,
    SetupError,
)
from configenv.core.result import Failure, Result, Success
from configenv.loader import LOCAL_CONFIG_FILE_NAME
from configenv.schema import ConfigItem, ConfigValidator, derive_env_name
from configenv.validation import (
    a_to_int,
    a_to_uint,
    obtain_int_range_validator,
    obtain_is_boolean_validator,
    obtain_is_regex_validator,
    obtain_not_empty_validator,
    obtain_pattern_validator,
    obtain_single_character_validator,
    obtain_uint_range_validator,
    parse_bool,
)

__all__ = [
    "ConfigEnv",
    "ConfigItem",
    "ConfigValidator",
    "WarnFunc",
    "LOCAL_CONFIG_FILE_NAME",
    "load_config",
    "derive_env_name",
    "ConfigEnvException",
    "ConfigurationError",
    "SetupError",
    "ConfigFileError",
    "InvalidValueError",
    "ConfigValidationError",
    "Success",
    "Failure",
    "Result",
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
