"""Tests for buffered Rich rendering."""

from __future__ import annotations

from io import StringIO

from cpcommon.output.console import CP_THEME, create_console, render_to_text


class TestRenderToText:
    def test_returns_printed_text(self) -> None:
        assert render_to_text(lambda console: console.print("hello")) == "hello"

    def test_strips_trailing_newlines(self) -> None:
        text = render_to_text(lambda console: console.print("a\n\n"))
        assert text == "a"

    def test_theme_styles_resolve(self) -> None:
        text = render_to_text(lambda console: console.print("ok", style="cp.ok"))
        assert text == "ok"


class TestCreateConsole:
    def test_writes_into_given_buffer(self) -> None:
        buffer = StringIO()
        console = create_console(buffer, width=40)
        console.print("into buffer")
        assert buffer.getvalue() == "into buffer\n"
        assert console.width == 40

    def test_theme(self) -> None:
        assert "cp.error" in CP_THEME.styles
