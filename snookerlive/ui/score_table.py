"""Centered, bordered score table rendered as plain text."""

import sys
from typing import Sequence, TextIO

from rich.cells import cell_len, set_cell_size

from .terminal import terminal_width

ELLIPSIS = "…"


def _fit(line: str, limit: int) -> str:
    """Crop ``line`` to ``limit`` cells, marking the cut with an ellipsis"""
    if cell_len(line) <= limit:
        return line
    return set_cell_size(line, limit - 1) + ELLIPSIS


def format_score_table(lines: Sequence[str], width: int) -> list[str]:
    """Lay out ``lines`` as a box centered in a terminal ``width`` columns wide.

    Widths are measured in terminal cells so wide characters stay aligned.
    Lines that would push the box past the terminal edge are truncated.
    """
    if not lines:
        return []

    max_width = max(cell_len(line) for line in lines)
    if max_width + 2 > width:
        limit = max(width - 2, 1)
        lines = [_fit(line, limit) for line in lines]
        max_width = max(cell_len(line) for line in lines)

    # Never let padding push the right border past the last column
    padding = " " * max(0, min((width - max_width) // 2, width - max_width - 2))
    border = f"{padding}+{'*' * max_width}+"

    table = [border]
    for line in lines:
        spaces_needed = max_width - cell_len(line)
        left_padding = spaces_needed // 2
        right_padding = spaces_needed - left_padding
        table.append(
            f"{padding}|{' ' * left_padding}{line}{' ' * right_padding}|"
        )
    table.append(border)
    return table


def render_score_table(
    lines: Sequence[str], width: int | None = None, out: TextIO | None = None
) -> str:
    """Write the score table to ``out`` (stdout by default) and return what was written"""
    if not lines:
        return ""

    if width is None:
        width = terminal_width()

    text = "".join(f"{row}\n" for row in format_score_table(lines, width))
    out = out or sys.stdout
    out.write(text)
    out.flush()
    return text
