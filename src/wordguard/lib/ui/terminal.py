"""Terminal detection utilities."""

import sys


def is_tty() -> bool:
    """Check if stdout is connected to a terminal.

    Returns:
        True if stdout is a TTY (interactive terminal), False otherwise.
    """
    return sys.stdout.isatty()
