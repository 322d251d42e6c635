"""Tests for octorelease.release.macros module."""

from __future__ import annotations

from octorelease.release.macros import expand_all, replace_macro


class TestReplaceMacro:
    def test_braced(self) -> None:
        assert replace_macro('--version="${VER}"', {"VER": "1.2.3"}) == '--version="1.2.3"'

    def test_bare(self) -> None:
        assert replace_macro("--deployto=$ENV", {"ENV": "staging"}) == "--deployto=staging"

    def test_bare_name_stops_at_non_word(self) -> None:
        assert replace_macro("$ENV-eu", {"ENV": "staging"}) == "staging-eu"

    def test_undefined_left_as_is(self) -> None:
        assert replace_macro("${MISSING} $ALSO", {}) == "${MISSING} $ALSO"

    def test_double_dollar_is_literal(self) -> None:
        assert replace_macro("a$$b", {"b": "x"}) == "a$b"

    def test_values_are_not_rescanned(self) -> None:
        assert replace_macro("${A}", {"A": "${B}", "B": "x"}) == "${B}"

    def test_percent_tokens_untouched(self) -> None:
        assert replace_macro("%ERRORLEVEL%", {"ERRORLEVEL": "1"}) == "%ERRORLEVEL%"

    def test_multiple(self) -> None:
        variables = {"P": "Web", "V": "2.0"}
        assert replace_macro("${P}-${V}", variables) == "Web-2.0"


class TestExpandAll:
    def test_two_stages(self) -> None:
        tokens = ['--version="${VER}"', '--deployto="${ENV}"']

        expanded = expand_all(tokens, {"VER": "1.2.3"}, {"ENV": "staging"})

        assert expanded == ['--version="1.2.3"', '--deployto="staging"']

    def test_variables_see_environment_output(self) -> None:
        expanded = expand_all(["${NOTES}"], {"NOTES": "${BUILD_ID}.md"}, {"BUILD_ID": "42"})
        assert expanded == ["42.md"]

    def test_environment_wins_when_both_define(self) -> None:
        expanded = expand_all(["${X}"], {"X": "env"}, {"X": "var"})
        assert expanded == ["env"]

    def test_preserves_order(self) -> None:
        assert expand_all(["a", "b", "c"], {}, {}) == ["a", "b", "c"]
