"""Terminal output helpers: TTY detection and colored result lines."""

from wordguard.lib.ui.colors import ANSIColors, colorize, format_result
from wordguard.lib.ui.terminal import is_tty

__all__ = [
    "ANSIColors",
    "colorize",
    "format_result",
    "is_tty",
]
