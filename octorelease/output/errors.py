"""Error presentation utilities.

Centralized step-error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from octorelease.core.errors import ErrorCode
from octorelease.release.arguments import format_command
from octorelease.release.errors import (
    ConfigurationError,
    ExternalToolFailure,
    PlatformError,
    ProcessLaunchError,
    StepError,
    ToolEnvironmentError,
)

if TYPE_CHECKING:
    from octorelease.output.console import ConsoleProtocol

__all__ = ["print_step_error", "step_error_exit_code"]


def print_step_error(error: StepError, console: ConsoleProtocol) -> None:
    """Print a step error to the build log."""
    match error:
        case ConfigurationError(message=message):
            console.error(message)
        case ToolEnvironmentError(message=message):
            console.error(message)
        case PlatformError(message=message):
            console.error(message)
        case ProcessLaunchError(command=command, message=message):
            console.error(f"could not start {format_command(list(command))}: {message}")
        case ExternalToolFailure(exit_code=code):
            console.error(f"octo.exe exited with code {code}")


def step_error_exit_code(error: StepError) -> int:
    """Get the CLI exit code for a step error."""
    match error:
        case ConfigurationError():
            return int(ErrorCode.USER_ERROR)
        case ToolEnvironmentError() | PlatformError():
            return int(ErrorCode.ENV_ERROR)
        case ProcessLaunchError():
            return int(ErrorCode.IO_ERROR)
        case ExternalToolFailure():
            return int(ErrorCode.TOOL_FAILURE)
