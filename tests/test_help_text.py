"""Tests for help-text substitution and diagnostics (core/help_text.py)."""

from __future__ import annotations

import pytest

from argv_scan.core.help_text import (
    PLACEHOLDER,
    program_name,
    render_help,
    try_help_hint,
)


class TestProgramName:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/usr/bin/hello_world", "hello_world"),
            ("./tool", "tool"),
            ("bundler", "bundler"),
            ("", ""),
        ],
    )
    def test_base_name(self, path: str, expected: str) -> None:
        assert program_name(path) == expected


class TestRenderHelp:
    def test_placeholder_token(self) -> None:
        assert PLACEHOLDER == "{name}"

    def test_every_occurrence_is_replaced(self) -> None:
        text = render_help("Usage: {name} [options]\n  {name} --help\n", "tool")
        assert text == "Usage: tool [options]\n  tool --help\n"

    def test_template_without_placeholder_is_unchanged(self) -> None:
        assert render_help("plain text", "tool") == "plain text"

    def test_other_braces_are_left_alone(self) -> None:
        assert render_help("{other} {name}", "tool") == "{other} tool"


class TestDiagnostics:
    def test_hint(self) -> None:
        assert try_help_hint("tool") == "Try 'tool --help' for more information."

