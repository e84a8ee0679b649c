"""Rich console formatting utilities.

Normal output goes to stdout; warnings and errors go to stderr so
scripted consumers can separate them from the summary.
"""

import sys

from rich.console import Console

from dsclean.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(
    theme=get_theme(),
    color_system=_detect_color_system(),
    highlight=False,
    soft_wrap=True,
)
err_console = Console(
    theme=get_theme(),
    stderr=True,
    color_system=_detect_color_system(),
    highlight=False,
    soft_wrap=True,
)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
