"""Core domain types."""

from .config import (
    ConfigError,
    ConfigStore,
    GlobalConfig,
    GlobalSettings,
    StepConfig,
    TomlConfigStore,
    global_config_path,
)
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ConfigStore",
    "GlobalConfig",
    "GlobalSettings",
    "StepConfig",
    "TomlConfigStore",
    "global_config_path",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
