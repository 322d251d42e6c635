from __future__ import annotations

import pytest
import typer

from octorelease import __version__
from octorelease.cli.app import _main, app  # pyright: ignore[reportPrivateUsage]


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(typer.Exit) as exc:
        _main(version=True)

    assert exc.value.exit_code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_commands_registered() -> None:
    names = {c.name for c in app.registered_commands}
    assert {"create-release", "show-config"} <= names
