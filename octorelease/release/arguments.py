"""octo.exe command line construction.

The order of the arguments is part of the contract with octo.exe and with
the people reading build logs; keep it stable.
"""

from __future__ import annotations

from octorelease.core.config import StepConfig
from octorelease.platform.process import command_line

__all__ = [
    "COMMAND",
    "build_arguments",
    "format_command",
    "wrap_for_windows",
]

COMMAND = "create-release"
API_KEY_FLAG = "--apiKey="
MASK = "****"


def build_arguments(
    step: StepConfig,
    *,
    executable_path: str,
    service_url: str,
    api_key: str,
) -> list[str]:
    """Build the octo.exe argument list, executable first.

    Optional flags are only added when their value is set.
    """
    args = [executable_path, COMMAND, f"--project={step.project_name}"]

    if step.version:
        args.append(f'--version="{step.version}"')

    if step.environment:
        args.append(f'--deployto="{step.environment}"')

    if step.wait_for_deployment:
        args.append("--waitfordeployment")

    if service_url:
        args.append(f"--server={service_url}")

    # The key's user must be allowed to create releases.
    if api_key:
        args.append(f"{API_KEY_FLAG}{api_key}")

    if step.release_note_files:
        args.append(f'--releasenotesfile="{step.release_note_files}"')

    return args


def wrap_for_windows(args: list[str]) -> list[str]:
    """Run ``args`` through cmd.exe and exit with the tool's own exit code."""
    return ["cmd.exe", "/C", *args, "&&", "exit", "%ERRORLEVEL%"]


def format_command(args: list[str]) -> str:
    """Render ``args`` for the build log, with the API key masked."""
    return command_line(
        [f"{API_KEY_FLAG}{MASK}" if arg.startswith(API_KEY_FLAG) else arg for arg in args]
    )
