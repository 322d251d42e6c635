from __future__ import annotations

import typer

from octorelease.cli.context import CLIContext, build_context
from octorelease.core.config import GlobalConfig
from octorelease.core.errors import ErrorCode
from octorelease.core.result import Err
from octorelease.output.console import Style
from octorelease.release.validation import (
    ValidationResult,
    ValidationStatus,
    validate_global_config,
)


def configure(
    executable_path: str = typer.Option(..., "--executable-path", help="Path to octo.exe"),
    server: str = typer.Option(..., "--server", help="Octopus server URL"),
    api_key: str = typer.Option(..., "--api-key", help="Octopus API key"),
) -> None:
    """Save the octo.exe location and Octopus server credentials."""
    ctx = build_context()

    candidate = GlobalConfig(executable_path=executable_path, service_url=server, api_key=api_key)
    _print_validation(ctx, validate_global_config(candidate))

    saved = ctx.settings.update(executable_path=executable_path, api_key=api_key, service_url=server)
    if isinstance(saved, Err):
        ctx.console.error(saved.error.message)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    ctx.console.success(f"configuration saved: {ctx.store.path}")


def show_config() -> None:
    """Show the current global configuration."""
    ctx = build_context()
    config = ctx.settings.get()

    ctx.console.print(f"config: {ctx.store.path}", Style.DIM)
    ctx.console.print(f"executable_path: {config.executable_path or '(not set)'}")
    ctx.console.print(f"service_url: {config.service_url or '(not set)'}")
    ctx.console.print(f"api_key: {'****' if config.api_key else '(not set)'}")


def check() -> None:
    """Validate the stored configuration."""
    ctx = build_context()
    results = validate_global_config(ctx.settings.get())
    _print_validation(ctx, results)

    if any(r.is_error for r in results):
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def _print_validation(ctx: CLIContext, results: list[ValidationResult]) -> None:
    for r in results:
        match r.status:
            case ValidationStatus.ERROR:
                ctx.console.error(f"{r.field}: {r.message}")
            case ValidationStatus.WARNING:
                ctx.console.warning(f"{r.field}: {r.message}")
            case ValidationStatus.OK:
                ctx.console.print(f"{r.field}: ok", Style.SUCCESS)
