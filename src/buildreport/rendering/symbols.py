# topmark:header:start
#
#   project      : BuildReport
#   file         : symbols.py
#   file_relpath : src/buildreport/rendering/symbols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colored status symbols for human-facing rendering.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `StatusSymbol`: `str, Enum` whose value is the Unicode glyph of a
      status symbol (info, success, warning, error). Each member also carries
      an ASCII fallback for terminals that cannot encode the glyph, and the
      colorizer used to draw it.

Design:
    `StatusSymbol` keeps `_value_` as the plain glyph and stores the fallback
    and the colorizer separately. This preserves Enum semantics (hashing,
    equality, `repr`) while exposing the presentation details as properties.

Example:
    ```python
    print(StatusSymbol.SUCCESS.value)                     # '✔'
    print(StatusSymbol.SUCCESS.render(unicode=False))     # green '√'
    ```
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from yachalk import chalk

if TYPE_CHECKING:
    from typing import TextIO


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword. BuildReport calls colorizers with a
    single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Decorate and concatenate the provided arguments.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values are provided.

        Returns:
            str: The decorated output string.
        """
        ...


class StatusSymbol(str, Enum):
    """Status glyphs of the report header, with ASCII fallbacks and colors."""

    _value_: str
    _fallback: str
    _color: Colorizer

    INFO = ("ℹ", "i", chalk.blue)
    SUCCESS = ("✔", "√", chalk.green)
    WARNING = ("⚠", "‼", chalk.yellow)
    ERROR = ("✖", "×", chalk.red)

    def __new__(cls, glyph: str, fallback: str, color: Colorizer) -> StatusSymbol:
        """Construct a status symbol member.

        Args:
            glyph (str): The Unicode glyph, stored as the member value.
            fallback (str): The glyph used when Unicode output is not available.
            color (Colorizer): A callable used to colorize the glyph.

        Returns:
            StatusSymbol: The newly constructed enum member.
        """
        obj: StatusSymbol = str.__new__(cls, glyph)
        obj._value_ = glyph
        obj._fallback = fallback
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the Unicode glyph of the member."""
        return self._value_

    @property
    def fallback(self) -> str:
        """Return the ASCII-safe glyph of the member."""
        return self._fallback

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, unicode: bool = True, color: bool = True) -> str:
        """Return the glyph for display.

        Args:
            unicode (bool): Use the Unicode glyph instead of the ASCII fallback.
            color (bool): Wrap the glyph with the member's colorizer.

        Returns:
            str: The displayable symbol.
        """
        glyph = self._value_ if unicode else self._fallback
        return self._color(glyph) if color else glyph


def supports_unicode(stream: TextIO | None = None) -> bool:
    """Return True if ``stream`` can encode every status glyph.

    Args:
        stream (TextIO | None): The output stream, defaults to `sys.stdout`.

    Returns:
        bool: Whether the Unicode glyphs can be written to ``stream``.
    """
    stream = stream or sys.stdout
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        "".join(member.value for member in StatusSymbol).encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True
