"""Terminal helpers: screen clearing and size queries."""

import shutil
import sys
from typing import TextIO

DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_TERMINAL_HEIGHT = 24

CLEAR_SCREEN = "\033[2J\033[1;1H"  # Clear and home the cursor


def terminal_width() -> int:
    """Current terminal width in columns, 80 when there is no usable terminal"""
    try:
        columns = shutil.get_terminal_size(
            fallback=(DEFAULT_TERMINAL_WIDTH, DEFAULT_TERMINAL_HEIGHT)
        ).columns
    except (OSError, ValueError):
        return DEFAULT_TERMINAL_WIDTH
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def clear_screen(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    out.write(CLEAR_SCREEN)
    out.flush()
