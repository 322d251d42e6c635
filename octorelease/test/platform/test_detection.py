"""Tests for octorelease.platform.detection module."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from octorelease.platform import detection
from octorelease.platform.detection import Platform, detect_platform, is_unix, is_windows


@pytest.fixture(autouse=True)
def _clear_cache() -> Iterator[None]:
    detect_platform.cache_clear()
    yield
    detect_platform.cache_clear()


class TestPlatform:
    """Test Platform enum."""

    def test_is_unix(self) -> None:
        assert Platform.LINUX.is_unix
        assert Platform.MACOS.is_unix
        assert not Platform.WINDOWS.is_unix
        assert not Platform.UNKNOWN.is_unix


class TestDetectPlatform:
    """Test detection from sys.platform."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("linux", Platform.LINUX),
            ("darwin", Platform.MACOS),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("msys", Platform.WINDOWS),
            ("sunos5", Platform.UNKNOWN),
        ],
    )
    def test_detect(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: Platform) -> None:
        monkeypatch.setattr(detection._sys, "platform", value)
        assert detect_platform() == expected

    def test_windows_is_not_unix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(detection._sys, "platform", "win32")
        assert is_windows()
        assert not is_unix()

    def test_linux_is_unix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(detection._sys, "platform", "linux")
        assert is_unix()
        assert not is_windows()

    def test_cached(self) -> None:
        assert detect_platform() is detect_platform()
