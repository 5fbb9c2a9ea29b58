# topmark:header:start
#
#   project      : BuildReport
#   file         : theme.py
#   file_relpath : src/buildreport/rendering/theme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Presentation capability used by the report renderer.

The renderer never talks to a terminal styling library directly; it asks a
`Theme` for the four status symbols and for a handful of role-named
colorizers:

- ``label``: section labels (``errors:``, ``chunks:``, ``output at: ...``)
- ``alert``: error details and the failure banner
- ``caution``: warning details
- ``success``: the success banner
- ``link``: the output location URI
- ``raw_size`` / ``gzip_size``: the two size figures of an asset line

`chalk_theme` maps these roles onto `yachalk` styles; `plain_theme` leaves
text untouched and is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from buildreport.rendering.symbols import StatusSymbol, supports_unicode

if TYPE_CHECKING:
    from typing import TextIO

    from buildreport.rendering.symbols import Colorizer


def _identity(*args: object, sep: str = " ") -> str:
    return sep.join(str(arg) for arg in args)


@dataclass(frozen=True)
class Theme:
    """Symbols and colorizers for the report.

    Attributes:
        info (str): Symbol in front of the version lines.
        success (str): Symbol in front of the hash line.
        error (str): Symbol in front of the error count.
        warning (str): Symbol in front of the warning count.
        label (Colorizer): Section labels.
        alert (Colorizer): Error details and failure banner.
        caution (Colorizer): Warning details.
        ok (Colorizer): Success banner.
        link (Colorizer): Output location.
        raw_size (Colorizer): Raw asset size.
        gzip_size (Colorizer): Gzip asset size.
    """

    info: str
    success: str
    error: str
    warning: str
    label: Colorizer = _identity
    alert: Colorizer = _identity
    caution: Colorizer = _identity
    ok: Colorizer = _identity
    link: Colorizer = _identity
    raw_size: Colorizer = _identity
    gzip_size: Colorizer = _identity


def chalk_theme(*, unicode: bool | None = None, stream: TextIO | None = None) -> Theme:
    """Return the colored theme.

    Args:
        unicode (bool | None): Force Unicode glyphs on or off. When None, the
            capability of ``stream`` is probed.
        stream (TextIO | None): Stream the report is written to (defaults to stdout).

    Returns:
        Theme: A theme backed by yachalk styles.
    """
    if unicode is None:
        unicode = supports_unicode(stream)
    return Theme(
        info=StatusSymbol.INFO.render(unicode=unicode),
        success=StatusSymbol.SUCCESS.render(unicode=unicode),
        error=StatusSymbol.ERROR.render(unicode=unicode),
        warning=StatusSymbol.WARNING.render(unicode=unicode),
        label=chalk.yellow,
        alert=chalk.red,
        caution=chalk.gray,
        ok=chalk.green,
        link=chalk.cyan.underline,
        raw_size=chalk.yellow,
        gzip_size=chalk.blue,
    )


def plain_theme(*, unicode: bool | None = None, stream: TextIO | None = None) -> Theme:
    """Return a theme without ANSI styling.

    Args:
        unicode (bool | None): Force Unicode glyphs on or off. When None, the
            capability of ``stream`` is probed.
        stream (TextIO | None): Stream the report is written to (defaults to stdout).

    Returns:
        Theme: A theme whose colorizers return their input unchanged.
    """
    if unicode is None:
        unicode = supports_unicode(stream)
    return Theme(
        info=StatusSymbol.INFO.render(unicode=unicode, color=False),
        success=StatusSymbol.SUCCESS.render(unicode=unicode, color=False),
        error=StatusSymbol.ERROR.render(unicode=unicode, color=False),
        warning=StatusSymbol.WARNING.render(unicode=unicode, color=False),
    )


def make_theme(*, enable_color: bool, unicode: bool | None = None) -> Theme:
    """Return `chalk_theme` or `plain_theme` depending on ``enable_color``."""
    if enable_color:
        return chalk_theme(unicode=unicode)
    return plain_theme(unicode=unicode)
