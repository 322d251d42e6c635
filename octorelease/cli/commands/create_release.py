from __future__ import annotations

import os
from pathlib import Path

import typer

from octorelease.cli.context import build_context
from octorelease.core.config import StepConfig
from octorelease.core.result import Err
from octorelease.output.errors import print_step_error, step_error_exit_code
from octorelease.release.step import BuildContext, run_step


def parse_variables(pairs: list[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a mapping; later pairs win."""
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--var")
        variables[key] = value
    return variables


def create_release(
    project: str = typer.Option(..., "--project", help="Octopus project name"),
    version: str = typer.Option("", "--version", help="Release version (default: chosen by octo)"),
    deploy_to: str = typer.Option("", "--deployto", help="Environment to deploy the release to"),
    wait: bool = typer.Option(False, "--wait", help="Wait for the deployment to finish"),
    release_notes: str = typer.Option("", "--release-notes", help="Release notes file"),
    var: list[str] = typer.Option([], "--var", help="Build variable KEY=VALUE (repeatable)"),
    module_root: Path = typer.Option(Path("."), "--module-root", help="Module checkout directory"),
    workspace_root: Path | None = typer.Option(
        None, "--workspace-root", help="Workspace root (default: module root)"
    ),
) -> None:
    """Create an Octopus release with octo.exe."""
    ctx = build_context()

    step = StepConfig(
        project_name=project,
        version=version,
        environment=deploy_to,
        wait_for_deployment=wait,
        release_note_files=release_notes,
    )
    build = BuildContext(
        module_root=module_root,
        workspace_root=workspace_root if workspace_root is not None else module_root,
        environment=dict(os.environ),
        variables=parse_variables(var),
    )

    result = run_step(
        step,
        build,
        settings=ctx.settings.get(),
        launcher=ctx.launcher,
        console=ctx.console,
    )
    if isinstance(result, Err):
        print_step_error(result.error, ctx.console)
        raise typer.Exit(code=step_error_exit_code(result.error))

    ctx.console.success(f"release created for {project}")
