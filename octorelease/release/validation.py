"""Field-level validation of the global settings.

Validators give feedback to whoever edits the settings; they never block
saving them, and the release step does its own (stricter) checks at run
time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from octorelease.core.config import GlobalConfig

__all__ = [
    "ValidationResult",
    "ValidationStatus",
    "validate_api_key",
    "validate_executable_path",
    "validate_global_config",
    "validate_service_url",
]

MIN_LENGTH = 4


class ValidationStatus(Enum):
    OK = auto()
    WARNING = auto()
    """Value accepted but looks suspicious."""
    ERROR = auto()
    """Value missing."""


@dataclass(frozen=True, slots=True)
class ValidationResult:
    field: str
    status: ValidationStatus
    message: str = ""

    @property
    def is_error(self) -> bool:
        return self.status == ValidationStatus.ERROR

    @property
    def is_warning(self) -> bool:
        return self.status == ValidationStatus.WARNING


def _check(field: str, value: str | None, label: str) -> ValidationResult:
    if not value:
        return ValidationResult(field, ValidationStatus.ERROR, f"Please set an {label}")
    if len(value) < MIN_LENGTH:
        label = label[0].upper() + label[1:]
        return ValidationResult(field, ValidationStatus.WARNING, f"{label} is too short")
    return ValidationResult(field, ValidationStatus.OK)


def validate_executable_path(value: str | None) -> ValidationResult:
    return _check("executable_path", value, "executable path")


def validate_api_key(value: str | None) -> ValidationResult:
    return _check("api_key", value, "Api Key")


def validate_service_url(value: str | None) -> ValidationResult:
    return _check("service_url", value, "Octopus Url")


def validate_global_config(config: GlobalConfig) -> list[ValidationResult]:
    """Run every field validator, in display order."""
    return [
        validate_executable_path(config.executable_path),
        validate_api_key(config.api_key),
        validate_service_url(config.service_url),
    ]
