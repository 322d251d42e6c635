"""The "Octopus Create Release" build step.

``perform`` is what a pipeline host calls: it checks the configuration,
builds the octo.exe command line, expands build variables in it, runs it
through cmd.exe and reports success when octo.exe exits with 0.

``run_step`` does the same work but returns the outcome as a ``Result`` so
callers can map each failure to their own exit code or UI.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from octorelease.core.config import GlobalConfig, StepConfig
from octorelease.core.result import Err, Ok, Result
from octorelease.output.console import ConsoleProtocol
from octorelease.output.errors import print_step_error

from .arguments import build_arguments, format_command, wrap_for_windows
from .errors import (
    ConfigurationError,
    ExternalToolFailure,
    PlatformError,
    ProcessLaunchError,
    StepError,
    ToolEnvironmentError,
)
from .launcher import Launcher
from .macros import expand_all

__all__ = [
    "BuildContext",
    "BuildResult",
    "DISPLAY_NAME",
    "ExecutionResult",
    "Invocation",
    "perform",
    "prepare_invocation",
    "resolve_working_directory",
    "run_step",
]

DISPLAY_NAME = "Octopus Create Release"


class BuildResult(Enum):
    SUCCESS = auto()
    UNSTABLE = auto()
    FAILURE = auto()


def _empty_vars() -> dict[str, str]:
    return {}


@dataclass
class BuildContext:
    """What the release step needs to know about the running build.

    Attributes:
        module_root: Checkout directory of the built module.
        workspace_root: Root of the build workspace.
        environment: Environment variables of the build; also the
            environment octo.exe runs with.
        variables: Build variables (parameters), expanded after
            ``environment``.
        result: Overall build result; the step may force it to FAILURE.
    """

    module_root: Path
    workspace_root: Path
    environment: dict[str, str] = field(default_factory=_empty_vars)
    variables: dict[str, str] = field(default_factory=_empty_vars)
    result: BuildResult = BuildResult.SUCCESS


@dataclass(frozen=True, slots=True)
class Invocation:
    args: tuple[str, ...]
    cwd: Path
    env: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class _Server:
    executable_path: str
    service_url: str
    api_key: str


def _check_preconditions(
    step: StepConfig, settings: GlobalConfig, launcher: Launcher
) -> Result[_Server, StepError]:
    if not step.project_name:
        return Err(ConfigurationError("project_name", "Project Name cannot be empty"))
    if not settings.executable_path:
        return Err(
            ConfigurationError(
                "executable_path", "Executable path is empty in global configuration"
            )
        )
    if not settings.service_url:
        return Err(ConfigurationError("service_url", "Octopus Url cannot be empty"))
    if not settings.api_key:
        return Err(ConfigurationError("api_key", "Octopus Api Key cannot be empty"))
    if launcher.is_unix():
        return Err(PlatformError())
    return Ok(
        _Server(
            executable_path=settings.executable_path,
            service_url=settings.service_url,
            api_key=settings.api_key,
        )
    )


def _check_executable(path: str, launcher: Launcher) -> Result[None, StepError]:
    try:
        found = launcher.exists(Path(path))
    except OSError:
        return Err(
            ToolEnvironmentError(
                path, f"Failed checking for existence of {path}", probe_failed=True
            )
        )
    if not found:
        return Err(ToolEnvironmentError(path, f"{path} doesn't exist"))
    return Ok(None)


def resolve_working_directory(executable_path: str, build: BuildContext, launcher: Launcher) -> Path:
    """Pick the directory octo.exe runs from.

    The module root when the executable sits inside it, else the workspace
    root.
    """
    try:
        if launcher.exists(build.module_root / executable_path):
            return build.module_root
    except OSError:
        pass
    return build.workspace_root


def prepare_invocation(
    step: StepConfig,
    settings: GlobalConfig,
    build: BuildContext,
    cwd: Path,
) -> Invocation:
    """Build the final, expanded and cmd.exe-wrapped command line."""
    args = build_arguments(
        step,
        executable_path=settings.executable_path or "",
        service_url=settings.service_url or "",
        api_key=settings.api_key or "",
    )
    expanded = expand_all(args, build.environment, build.variables)
    return Invocation(
        args=tuple(wrap_for_windows(expanded)),
        cwd=cwd,
        env=dict(build.environment),
    )


def run_step(
    step: StepConfig,
    build: BuildContext,
    *,
    settings: GlobalConfig,
    launcher: Launcher,
    console: ConsoleProtocol,
) -> Result[ExecutionResult, StepError]:
    """Create the release and return how octo.exe exited.

    ``settings`` is a single snapshot; pass ``GlobalSettings.get()``.
    """
    checked = _check_preconditions(step, settings, launcher)
    if isinstance(checked, Err):
        return checked
    server = checked.value

    console.print(f"Executable path will be {server.executable_path}")

    found = _check_executable(server.executable_path, launcher)
    if isinstance(found, Err):
        return found

    cwd = resolve_working_directory(server.executable_path, build, launcher)
    invocation = prepare_invocation(step, settings, build, cwd)
    args = list(invocation.args)

    console.print(f"Executing the command {format_command(args)} from {invocation.cwd}")

    launched = launcher.launch(args, invocation.env, invocation.cwd, console.raw)
    if isinstance(launched, Err):
        build.result = BuildResult.FAILURE
        return Err(ProcessLaunchError(command=launched.error.command, message=launched.error.message))

    result = ExecutionResult(exit_code=launched.value)
    if not result.success:
        return Err(ExternalToolFailure(exit_code=result.exit_code))
    return Ok(result)


def perform(
    step: StepConfig,
    build: BuildContext,
    *,
    settings: GlobalConfig,
    launcher: Launcher,
    console: ConsoleProtocol,
) -> bool:
    """Run the step; True when the release was created."""
    result = run_step(step, build, settings=settings, launcher=launcher, console=console)
    if isinstance(result, Err):
        print_step_error(result.error, console)
        return False
    return True
