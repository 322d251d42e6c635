"""Tests for octorelease.output.console module."""

from __future__ import annotations

import pytest

from octorelease.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("Executable path will be Octo.exe")
        assert console.outputs == [OutputRecord("Executable path will be Octo.exe", Style.DEFAULT)]

    def test_print_keeps_style(self) -> None:
        console = MockConsole()
        console.print("config: global.toml", Style.DIM)
        assert console.outputs == [OutputRecord("config: global.toml", Style.DIM)]

    def test_raw_is_verbatim(self) -> None:
        console = MockConsole()
        console.raw("[Info] Release 1.2.3 created")
        assert console.messages == ["[Info] Release 1.2.3 created"]

    def test_error(self) -> None:
        console = MockConsole()
        console.error("Octo.exe doesn't exist")
        assert console.outputs[0].message == "error: Octo.exe doesn't exist"
        assert console.has_error()

    def test_success_and_warning(self) -> None:
        console = MockConsole()
        console.success("done")
        console.warning("Api Key is too short")
        assert console.messages == ["OK done", "warning: Api Key is too short"]
        assert not console.has_error()

    def test_text(self) -> None:
        console = MockConsole()
        console.print("one")
        console.print("two")
        assert console.text == "one\ntwo"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("ok")


class TestRichConsole:
    """Smoke tests for RichConsole."""

    def test_methods_write_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("plain")
        console.error("bad [project]")
        console.raw("[bold]not markup[/bold]")

        out = capsys.readouterr().out
        assert "plain" in out
        assert "bad [project]" in out
        assert "[bold]not markup[/bold]" in out

    def test_long_lines_are_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = "Executing the command " + " ".join(f"--flag{i}=value" for i in range(20))
        console = RichConsole()
        console.print(line)
        console.error(line)

        out = capsys.readouterr().out
        assert out.splitlines() == [line, f"error: {line}"]
