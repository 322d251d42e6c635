from __future__ import annotations

from dataclasses import dataclass

import typer

from octorelease.core.config import GlobalSettings, TomlConfigStore, global_config_path
from octorelease.core.errors import ErrorCode
from octorelease.core.result import Err
from octorelease.output.console import ConsoleProtocol, RichConsole
from octorelease.release.launcher import Launcher, LocalLauncher


@dataclass(frozen=True, slots=True)
class CLIContext:
    store: TomlConfigStore
    settings: GlobalSettings
    launcher: Launcher
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()
    store = TomlConfigStore(global_config_path())

    loaded = GlobalSettings.load(store)
    if isinstance(loaded, Err):
        console.error(loaded.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        store=store,
        settings=loaded.value,
        launcher=LocalLauncher(),
        console=console,
    )
