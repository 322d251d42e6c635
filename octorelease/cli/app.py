from __future__ import annotations

import typer

from octorelease import __version__
from octorelease.cli.commands.config_cmd import check, configure, show_config
from octorelease.cli.commands.create_release import create_release
from octorelease.release.step import DISPLAY_NAME


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help=DISPLAY_NAME,
)


# Commands
app.command("create-release")(create_release)
app.command()(configure)
app.command("show-config")(show_config)
app.command()(check)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
