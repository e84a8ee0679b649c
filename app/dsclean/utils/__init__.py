"""Utility modules for dsclean.

This module exports commonly used utility functions.
"""

from dsclean.utils.formatting import (
    console,
    err_console,
    print_error,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_warning",
]
