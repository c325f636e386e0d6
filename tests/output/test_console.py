"""Tests for the Rich console factory."""

from rich.text import Text

from timewizard.output.console import TW_THEME, create_console, get_output, style_for_outcome


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print(Text("hello", style="tw.ok"))
        assert get_output(console) == "hello\n"

    def test_outcome_styles_exist(self) -> None:
        for outcome in ("annotated", "duration", "invalid", "missing", "failed"):
            assert style_for_outcome(outcome) in TW_THEME.styles

    def test_empty_outcome_has_no_style(self) -> None:
        assert style_for_outcome("") == ""
