from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ConfigurationError:
    field: Literal["project_name", "executable_path", "service_url", "api_key"]
    message: str


@dataclass(frozen=True, slots=True)
class ToolEnvironmentError:
    path: str
    message: str
    probe_failed: bool = False


@dataclass(frozen=True, slots=True)
class PlatformError:
    message: str = "Unix is not supported"


@dataclass(frozen=True, slots=True)
class ProcessLaunchError:
    command: tuple[str, ...]
    message: str


@dataclass(frozen=True, slots=True)
class ExternalToolFailure:
    exit_code: int


StepError = (
    ConfigurationError
    | ToolEnvironmentError
    | PlatformError
    | ProcessLaunchError
    | ExternalToolFailure
)
