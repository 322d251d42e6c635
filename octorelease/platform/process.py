"""Subprocess execution with Result-based error handling.

``stream`` starts a command, forwards every line it writes (stdout and stderr
merged) to a callback as soon as it is produced, and returns the exit code.
A command that runs and fails is still ``Ok``: interpreting the exit code is
the caller's business. Only a command that cannot be started is an ``Err``.

Usage:
    result = stream(["cmd.exe", "/C", "octo.exe", "help"], cwd=root, env=env,
                    on_line=console.raw)
    match result:
        case Ok(code):
            print(f"exit {code}")
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import locale
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from octorelease.core.result import Err, Ok, Result

from .detection import is_windows

__all__ = ["ProcessError", "command_line", "stream"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be started.

    Attributes:
        command: The command that was attempted.
        message: The OS error text.
    """

    command: tuple[str, ...]
    message: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} could not be started: {self.message}"


def _is_quoted(arg: str) -> bool:
    return len(arg) >= 2 and arg.startswith('"') and arg.endswith('"')


def command_line(args: list[str]) -> str:
    """Join ``args`` into a Windows command line.

    Tokens containing whitespace are wrapped in double quotes unless they
    already are. Embedded quotes are kept as they are, so
    ``--version="1.2.3"`` reaches the program unchanged.
    """
    rendered: list[str] = []
    for arg in args:
        if any(ch.isspace() for ch in arg) and not _is_quoted(arg):
            arg = f'"{arg}"'
        rendered.append(arg)
    return " ".join(rendered)


def _output_encoding() -> str:
    # Console programs started by cmd.exe write in the OEM code page.
    if is_windows():
        return "oem"
    return locale.getencoding()


def stream(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
    *,
    on_line: Callable[[str], None],
) -> Result[int, ProcessError]:
    """Run a command, streaming its output line by line.

    On Windows the command is handed to the OS as the string built by
    ``command_line`` rather than by ``subprocess``'s own quoting.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Full environment for the child (inherits ours if None).
        on_line: Called with each output line, without its line ending.

    Returns:
        Ok(exit code) once the process has exited, Err(ProcessError) if it
        could not be started.
    """
    args: str | list[str] = command_line(cmd) if is_windows() else cmd
    try:
        proc = subprocess.Popen(
            args,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding=_output_encoding(),
            errors="replace",
            bufsize=1,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), message=str(e)))

    with proc:
        assert proc.stdout is not None
        for line in proc.stdout:
            on_line(line.rstrip("\r\n"))
        code = proc.wait()

    return Ok(code)
