"""Unit tests for wordguard.lib.ui.colors module."""

import pytest

from wordguard.lib.ui.colors import ANSIColors, colorize, format_result


@pytest.mark.unit
class TestColorize:
    """Tests for colorize function."""

    def test_colorize_applies_color_when_tty(self) -> None:
        """Test colorize wraps text with color codes when force_tty=True."""
        result = colorize("test", ANSIColors.GREEN, force_tty=True)
        assert result == f"{ANSIColors.GREEN}test{ANSIColors.RESET}"

    def test_colorize_returns_plain_text_when_not_tty(self) -> None:
        """Test colorize returns plain text when force_tty=False."""
        assert colorize("test", ANSIColors.GREEN, force_tty=False) == "test"


@pytest.mark.unit
class TestFormatResult:
    """Tests for format_result function."""

    def test_pass_line(self) -> None:
        """Test passing values show the label with a check mark."""
        assert format_result("HELLO", True, force_tty=False) == "✓ HELLO"

    def test_fail_line_shows_message(self) -> None:
        """Test failing values show the rejection message."""
        line = format_result("cat3", False, "bad word", force_tty=False)
        assert line == "✗ bad word"

    def test_fail_line_colored_red(self) -> None:
        """Test failures are red in TTY mode."""
        line = format_result("x", False, "bad", force_tty=True)
        assert line.startswith(ANSIColors.RED)
