"""Where octo.exe runs.

The release step only talks to the machine through a ``Launcher``: is it a
Unix host, does a path exist there, and run this command. ``LocalLauncher``
answers for the current machine; a CI host with remote agents supplies its
own implementation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol

from octorelease.core.result import Result
from octorelease.platform.detection import is_unix
from octorelease.platform.files import path_exists
from octorelease.platform.process import ProcessError, stream

__all__ = ["Launcher", "LocalLauncher"]


class Launcher(Protocol):
    def is_unix(self) -> bool: ...

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists; raise ``OSError`` if unknown."""
        ...

    def launch(
        self,
        args: list[str],
        env: Mapping[str, str],
        cwd: Path,
        sink: Callable[[str], None],
    ) -> Result[int, ProcessError]:
        """Run ``args`` to completion, feeding each output line to ``sink``."""
        ...


class LocalLauncher:
    """``Launcher`` for the machine this process runs on."""

    def is_unix(self) -> bool:
        return is_unix()

    def exists(self, path: Path) -> bool:
        return path_exists(path)

    def launch(
        self,
        args: list[str],
        env: Mapping[str, str],
        cwd: Path,
        sink: Callable[[str], None],
    ) -> Result[int, ProcessError]:
        return stream(args, cwd=cwd, env=env, on_line=sink)
