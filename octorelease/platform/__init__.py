"""Platform abstraction layer."""

from .detection import (
    Platform,
    is_unix,
    is_windows,
)
from .files import atomic_write_text, path_exists
from .paths import (
    home,
    user_config_dir,
)
from .process import (
    ProcessError,
    stream,
)

__all__ = [
    # detection
    "Platform",
    "is_unix",
    "is_windows",
    # files
    "atomic_write_text",
    "path_exists",
    # paths
    "home",
    "user_config_dir",
    # process
    "ProcessError",
    "stream",
]
