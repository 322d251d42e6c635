"""Operating system detection.

octo.exe is only shipped for Windows, so the release step needs a single
question answered about the machine it runs on: is it a Unix host?
"""

from __future__ import annotations

import sys as _sys
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "is_unix",
    "is_windows",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    @property
    def is_unix(self) -> bool:
        """Check if this is a Unix-like platform (Linux or macOS)."""
        return self in (Platform.LINUX, Platform.MACOS)


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI and hang.
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def is_windows() -> bool:
    return detect_platform() == Platform.WINDOWS


def is_unix() -> bool:
    return detect_platform().is_unix
