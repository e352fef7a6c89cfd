"""ANSI color utilities for check results.

Colors degrade to plain text when stdout is not a terminal.
"""

from wordguard.lib.ui.terminal import is_tty


class ANSIColors:
    """ANSI color escape codes used for pass/fail markers."""

    GREEN = "\033[92m"
    RED = "\033[91m"
    RESET = "\033[0m"


PASS_MARK = "✓"
FAIL_MARK = "✗"


def colorize(text: str, color: str, force_tty: bool | None = None) -> str:
    """Apply ANSI color codes to text if in TTY mode.

    Args:
        text: Text to colorize.
        color: ANSI color code to apply (e.g., ANSIColors.GREEN).
        force_tty: Override TTY detection. None uses auto-detection.

    Returns:
        Colorized text if in TTY mode, plain text otherwise.
    """
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors:
        return text
    return f"{color}{text}{ANSIColors.RESET}"


def format_result(
    label: str, passed: bool, message: str | None = None, force_tty: bool | None = None
) -> str:
    """Format one check outcome as a marked line.

    Args:
        label: Text shown for passing values
        passed: Whether the value passed
        message: Rejection message shown instead of ``label`` on failure
        force_tty: Override TTY detection

    Returns:
        ``✓ label`` or ``✗ message``, colored when appropriate
    """
    if passed:
        return colorize(f"{PASS_MARK} {label}", ANSIColors.GREEN, force_tty)
    return colorize(f"{FAIL_MARK} {message or label}", ANSIColors.RED, force_tty)
