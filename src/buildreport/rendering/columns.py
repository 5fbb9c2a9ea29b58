# topmark:header:start
#
#   project      : BuildReport
#   file         : columns.py
#   file_relpath : src/buildreport/rendering/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Arrange short strings into aligned columns.

Every cell is as wide as the widest entry (measured without ANSI escape
sequences) plus the padding. As many cells as fit in the available width are
placed on a row, left to right, keeping the input order. A single column
degenerates into one entry per line.
"""

from __future__ import annotations

import math
import shutil
from typing import TYPE_CHECKING

import click

from buildreport.constants import DEFAULT_COLUMN_PADDING, DEFAULT_TERMINAL_WIDTH

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def visible_width(text: str) -> int:
    """Return the printed width of ``text``, ignoring ANSI styling."""
    return len(click.unstyle(text))


def terminal_width() -> int:
    """Return the width of the attached terminal (80 columns when unknown)."""
    return shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns


def columns(
    items: Sequence[str],
    *,
    width: int | None = None,
    padding: int = DEFAULT_COLUMN_PADDING,
) -> str:
    """Lay out ``items`` in columns.

    Args:
        items (Sequence[str]): Entries to lay out, possibly ANSI-styled. Empty
            entries are skipped.
        width (int | None): Available width; defaults to the terminal width.
        padding (int): Spaces between two columns.

    Returns:
        str: The multi-line block, without trailing newline. Rows carry no
            trailing whitespace. An empty input yields an empty string.
    """
    cells: list[str] = [item for item in items if item]
    if not cells:
        return ""

    if width is None:
        width = terminal_width()

    cell_width = max(visible_width(cell) for cell in cells) + padding
    column_count = max(width // cell_width, 1)
    if column_count == 1:
        return "\n".join(cells)

    row_count = math.ceil(len(cells) / column_count)
    rows: list[str] = []
    for row_index in range(row_count):
        row_cells = cells[row_index * column_count : (row_index + 1) * column_count]
        line = "".join(cell + " " * (cell_width - visible_width(cell)) for cell in row_cells)
        rows.append(line.rstrip(" "))
    return "\n".join(rows)


def make_layout(
    *, width: int | None = None, padding: int = DEFAULT_COLUMN_PADDING
) -> Callable[[Sequence[str]], str]:
    """Return a one-argument layout function bound to ``width`` and ``padding``."""

    def layout(items: Sequence[str]) -> str:
        return columns(items, width=width, padding=padding)

    return layout
