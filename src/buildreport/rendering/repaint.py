# topmark:header:start
#
#   project      : BuildReport
#   file         : repaint.py
#   file_relpath : src/buildreport/rendering/repaint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal sink that redraws its previous output in place.

On an interactive terminal, each `RepaintSink.write` erases the block written
by the previous call before writing the new one, so a watch loop shows one
up-to-date report instead of a scrolling history. On other streams (pipes,
files, CI logs) writes are simply appended.
"""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING, Final, Protocol

from buildreport.config.logging import get_logger
from buildreport.rendering.columns import terminal_width, visible_width

if TYPE_CHECKING:
    from typing import TextIO

    from buildreport.config.logging import BuildreportLogger

logger: BuildreportLogger = get_logger(__name__)

ESC: Final[str] = "\x1b["
ERASE_LINE: Final[str] = f"{ESC}2K"
CURSOR_UP: Final[str] = f"{ESC}1A"
CURSOR_LEFT: Final[str] = f"{ESC}G"
CURSOR_HIDE: Final[str] = f"{ESC}?25l"
CURSOR_SHOW: Final[str] = f"{ESC}?25h"


class Sink(Protocol):
    """Anything the reporter can push a finished report to."""

    def write(self, text: str) -> None:
        """Display ``text``, replacing whatever the sink displayed before."""
        ...


def erase_lines(count: int) -> str:
    """Return the escape sequence erasing the last ``count`` terminal rows.

    The cursor ends at the start of the top-most erased row.
    """
    parts: list[str] = []
    for i in range(count):
        parts.append(ERASE_LINE)
        if i < count - 1:
            parts.append(CURSOR_UP)
    if count:
        parts.append(CURSOR_LEFT)
    return "".join(parts)


def count_rows(text: str, width: int) -> int:
    """Return the number of terminal rows ``text`` occupies at ``width`` columns."""
    width = max(width, 1)
    return sum(max(1, math.ceil(visible_width(line) / width)) for line in text.split("\n"))


class RepaintSink:
    """Write reports to a stream, repainting the previous one on terminals.

    Args:
        stream (TextIO | None): Destination stream. Defaults to `sys.stdout`.
        interactive (bool | None): Whether to repaint in place. When None,
            repainting is enabled iff ``stream`` is a TTY.
        width (int | None): Terminal width used to count wrapped rows;
            defaults to the current terminal width.
        show_cursor (bool): Keep the cursor visible while repainting.

    Attributes:
        stream (TextIO): Destination stream.
        interactive (bool): Whether writes repaint in place.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        interactive: bool | None = None,
        width: int | None = None,
        show_cursor: bool = False,
    ) -> None:
        self.stream = stream or sys.stdout
        if interactive is None:
            isatty = getattr(self.stream, "isatty", None)
            interactive = bool(isatty()) if callable(isatty) else False
        self.interactive = interactive
        self._width = width
        self._show_cursor = show_cursor
        self._previous_output: str = ""
        self._previous_rows: int = 0

    def write(self, text: str) -> None:
        """Display ``text`` as one atomic write.

        Writing the same text twice in a row is a no-op on interactive streams.
        """
        output = text + "\n"
        if not self.interactive:
            self.stream.write(output)
            self.stream.flush()
            return

        if output == self._previous_output:
            logger.trace("Report unchanged; skipping repaint")
            return

        prefix = "" if self._show_cursor else CURSOR_HIDE
        self.stream.write(prefix + erase_lines(self._previous_rows) + output)
        self.stream.flush()

        self._previous_output = output
        self._previous_rows = count_rows(output, self._width or terminal_width())
        logger.debug("Repainted report (%d rows)", self._previous_rows)

    def clear(self) -> None:
        """Erase the last written block (no-op on non-interactive streams)."""
        if not self.interactive:
            return
        self.stream.write(erase_lines(self._previous_rows))
        self.stream.flush()
        self._previous_output = ""
        self._previous_rows = 0

    def done(self) -> None:
        """Keep the last block on screen; the next write starts below it."""
        if self.interactive and not self._show_cursor:
            self.stream.write(CURSOR_SHOW)
            self.stream.flush()
        self._previous_output = ""
        self._previous_rows = 0
