"""Typed configuration for the release step.

Two kinds of settings exist:

- ``StepConfig``: what one pipeline step asks for (project, version, target
  environment...). Built per step, never shared.
- ``GlobalConfig``: where octo.exe lives and which Octopus server/API key to
  use. Shared by every build on the machine and persisted as TOML:

    executable_path = "C:/tools/Octo.exe"
    service_url = "https://octopus.example.com"
    api_key = "API-XXXX"

``GlobalSettings`` owns the current ``GlobalConfig`` snapshot and is the only
way to change it.
"""

from __future__ import annotations

import os
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from octorelease.platform.files import atomic_write_text
from octorelease.platform.paths import user_config_dir

from .result import Err, Ok, Result
from .structured import as_str_dict, clean_str, get_str, toml_string

__all__ = [
    "ConfigError",
    "ConfigStore",
    "GlobalConfig",
    "GlobalSettings",
    "StepConfig",
    "TomlConfigStore",
    "global_config_path",
]

CONFIG_PATH_ENV = "OCTORELEASE_CONFIG"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the global config cannot be loaded or saved."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class StepConfig:
    """Settings of one "create release" step.

    Attributes:
        project_name: Octopus project to release (required).
        version: Release version; octo.exe picks one when empty.
        environment: Environment to deploy the new release to, if any.
        wait_for_deployment: Block until the deployment finishes.
        release_note_files: Release notes file path, passed through verbatim.
    """

    project_name: str
    version: str = ""
    environment: str = ""
    wait_for_deployment: bool = False
    release_note_files: str = ""


@dataclass(frozen=True, slots=True)
class GlobalConfig:
    """Machine-wide settings. ``None`` means never configured."""

    executable_path: str | None = None
    service_url: str | None = None
    api_key: str | None = None

    def to_toml(self) -> str:
        lines: list[str] = []
        if self.executable_path is not None:
            lines.append(f"executable_path = {toml_string(self.executable_path)}")
        if self.service_url is not None:
            lines.append(f"service_url = {toml_string(self.service_url)}")
        if self.api_key is not None:
            lines.append(f"api_key = {toml_string(self.api_key)}")
        return "".join(f"{line}\n" for line in lines)


class ConfigStore(Protocol):
    """Persistence for ``GlobalConfig``."""

    def load(self) -> Result[GlobalConfig, ConfigError]: ...

    def save(self, config: GlobalConfig) -> Result[None, ConfigError]: ...


def global_config_path() -> Path:
    """Location of the global settings file.

    ``OCTORELEASE_CONFIG`` overrides the default under the user config dir.
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return user_config_dir() / "global.toml"


@dataclass(frozen=True, slots=True)
class TomlConfigStore:
    """``ConfigStore`` backed by a TOML file."""

    path: Path

    def load(self) -> Result[GlobalConfig, ConfigError]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return Ok(GlobalConfig())
        except PermissionError:
            return Err(ConfigError(f"Permission denied reading: {self.path}", path=self.path))
        except OSError as e:
            return Err(ConfigError(f"Error reading {self.path}: {e}", path=self.path))

        try:
            data_obj: object = tomllib.loads(raw.decode("utf-8"))
        except tomllib.TOMLDecodeError as e:
            return Err(ConfigError(f"Invalid TOML syntax: {e}", path=self.path))
        except UnicodeDecodeError as e:
            return Err(ConfigError(f"Invalid UTF-8 in config: {e}", path=self.path))

        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=self.path))

        return Ok(
            GlobalConfig(
                executable_path=get_str(data, "executable_path"),
                service_url=get_str(data, "service_url"),
                api_key=get_str(data, "api_key"),
            )
        )

    def save(self, config: GlobalConfig) -> Result[None, ConfigError]:
        try:
            atomic_write_text(self.path, config.to_toml(), encoding="utf-8")
        except OSError as e:
            return Err(ConfigError(f"Could not write {self.path}: {e}", path=self.path))
        return Ok(None)


class GlobalSettings:
    """The shared, persisted ``GlobalConfig``.

    Readers call ``get()`` and work on the returned immutable snapshot; the
    three fields always come from the same update. ``update()`` swaps in a new
    snapshot and persists it under a lock, so concurrent updates are applied
    and saved one at a time.
    """

    def __init__(self, config: GlobalConfig | None = None, store: ConfigStore | None = None) -> None:
        self._lock = threading.Lock()
        self._config = config if config is not None else GlobalConfig()
        self._store = store

    @classmethod
    def load(cls, store: ConfigStore) -> Result[GlobalSettings, ConfigError]:
        """Create settings from what ``store`` holds."""
        result = store.load()
        if isinstance(result, Err):
            return result
        return Ok(cls(result.value, store=store))

    def get(self) -> GlobalConfig:
        return self._config

    @property
    def executable_path(self) -> str | None:
        return self._config.executable_path

    @property
    def service_url(self) -> str | None:
        return self._config.service_url

    @property
    def api_key(self) -> str | None:
        return self._config.api_key

    def update(
        self,
        *,
        executable_path: str,
        api_key: str,
        service_url: str,
    ) -> Result[GlobalConfig, ConfigError]:
        """Replace all three settings at once, then persist them.

        Values are stripped, and blank ones stored as unset, the same way
        ``TomlConfigStore.load`` reads them back. The new values are visible
        to readers even if saving fails; the save error is returned so the
        caller can report it.
        """
        new = GlobalConfig(
            executable_path=clean_str(executable_path),
            service_url=clean_str(service_url),
            api_key=clean_str(api_key),
        )
        with self._lock:
            self._config = new
            if self._store is not None:
                saved = self._store.save(new)
                if isinstance(saved, Err):
                    return saved
        return Ok(new)
