# topmark:header:start
#
#   project      : BuildReport
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fakes shared across the BuildReport test suite.

- `RecordingSink` stores each pushed report instead of drawing it.
- `TAG_THEME` wraps themed text in ``<role>...</role>`` markers so tests can
  assert which role decorated which text without ANSI codes.
- `bracket_layout` renders a column block as ``[a | b]``.
- `make_result` returns the reference build result used by the report tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from buildreport.model import Asset, BuildResult, Chunk
from buildreport.rendering.theme import Theme

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


@dataclass
class RecordingSink:
    """Sink that records every write."""

    writes: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.writes.append(text)


def _tag(role: str) -> Callable[..., str]:
    def colorize(*args: object, sep: str = " ") -> str:
        return f"<{role}>{sep.join(str(a) for a in args)}</{role}>"

    return colorize


TAG_THEME = Theme(
    info="(i)",
    success="(v)",
    error="(x)",
    warning="(!)",
    label=_tag("label"),
    alert=_tag("alert"),
    caution=_tag("caution"),
    ok=_tag("ok"),
    link=_tag("link"),
    raw_size=_tag("raw"),
    gzip_size=_tag("gz"),
)


def bracket_layout(items: Sequence[str]) -> str:
    """Opaque stand-in for the column layout."""
    return "[" + " | ".join(items) + "]"


def make_result(**overrides: Any) -> BuildResult:
    """Return the reference build result, with ``overrides`` applied."""
    values: dict[str, Any] = {
        "hash": "hash",
        "assets": (Asset("assetOne.js", 1000), Asset("assetOne.js", 1000)),
        "chunks": (Chunk(("chunkOne",)),),
        "errors": (),
        "warnings": (),
    }
    values.update(overrides)
    return BuildResult(**values)
