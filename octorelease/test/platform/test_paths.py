"""Tests for octorelease.platform.paths module."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from octorelease.platform import paths
from octorelease.platform.paths import APP_NAME, clear_caches, home, user_config_dir


@pytest.fixture(autouse=True)
def _fresh_caches() -> Iterator[None]:
    clear_caches()
    yield
    clear_caches()


class TestUnixPaths:
    @pytest.fixture(autouse=True)
    def _unix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(paths, "is_windows", lambda: False)

    def test_home_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert home() == tmp_path

    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert user_config_dir() == tmp_path / "xdg" / APP_NAME

    def test_default_config_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_config_dir() == tmp_path / ".config" / "octorelease"


class TestWindowsPaths:
    @pytest.fixture(autouse=True)
    def _windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(paths, "is_windows", lambda: True)

    def test_appdata(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
        assert user_config_dir() == tmp_path / "Roaming" / APP_NAME

    def test_without_appdata(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APPDATA", raising=False)
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        assert user_config_dir() == tmp_path / "AppData" / "Roaming" / APP_NAME
