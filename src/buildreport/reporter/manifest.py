# topmark:header:start
#
#   project      : BuildReport
#   file         : manifest.py
#   file_relpath : src/buildreport/reporter/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chunk and asset manifest of a build.

Two existence gates apply, with different scopes:

- If the output path is not a directory, there is no manifest at all and the
  report omits the ``chunks:``/``assets:`` section.
- If the directory exists but an asset file does not (yet), only that asset is
  left out. Other assets, including assets with the same name, are checked on
  their own.

Sizes are shown in kilobytes, rounded half-up to two decimals, next to a gzip
figure. The gzip figure is an estimate (raw size times a fixed ratio) unless a
`MeasuredGzipSizer` is used, which compresses the file on disk.
"""

from __future__ import annotations

import gzip
import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from buildreport.config.logging import get_logger
from buildreport.constants import DEFAULT_GZIP_RATIO
from buildreport.rendering.columns import columns

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from buildreport.config.logging import BuildreportLogger
    from buildreport.model import Asset, BuildResult, OutputConfig
    from buildreport.rendering.theme import Theme

logger: BuildreportLogger = get_logger(__name__)

_KB = Decimal(1024)
_TWO_PLACES = Decimal("0.01")


class GzipMode(str, Enum):
    """How the gzip size of an asset is obtained.

    Attributes:
        ESTIMATE: Scale the raw size by a fixed ratio.
        MEASURE: Compress the file on disk and measure the result.
    """

    ESTIMATE = "estimate"
    MEASURE = "measure"


def round_kb(value: Decimal) -> Decimal:
    """Round a kilobyte figure half-up to two decimals."""
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def to_kb(size: int) -> Decimal:
    """Convert a byte count to kilobytes, rounded to two decimals."""
    return round_kb(Decimal(size) / _KB)


def format_kb(value: Decimal) -> str:
    """Render a kilobyte figure without trailing zeros (``0.98``, ``1.5``, ``2``)."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class RatioGzipSizer:
    """Estimate the gzip size as the raw kilobyte figure times ``ratio``."""

    def __init__(self, ratio: float = DEFAULT_GZIP_RATIO) -> None:
        if ratio <= 0:
            raise ValueError(f"gzip ratio must be positive, got {ratio!r}")
        self.ratio = ratio
        self._ratio = Decimal(str(ratio))

    def __call__(self, asset: Asset, path: str) -> Decimal:
        return round_kb(to_kb(asset.size) * self._ratio)


class MeasuredGzipSizer:
    """Compress the asset file at ``path`` and return the compressed size.

    I/O errors are not caught.
    """

    def __init__(self, compresslevel: int = 9) -> None:
        self.compresslevel = compresslevel

    def __call__(self, asset: Asset, path: str) -> Decimal:
        data = Path(path).read_bytes()
        compressed = gzip.compress(data, compresslevel=self.compresslevel, mtime=0)
        return to_kb(len(compressed))


def make_gzip_sizer(
    mode: GzipMode = GzipMode.ESTIMATE, *, ratio: float = DEFAULT_GZIP_RATIO
) -> Callable[[Asset, str], Decimal]:
    """Return the gzip sizer for ``mode``."""
    if mode is GzipMode.MEASURE:
        return MeasuredGzipSizer()
    return RatioGzipSizer(ratio)


@dataclass(frozen=True, slots=True)
class Manifest:
    """The chunks and assets section of a report.

    Attributes:
        chunk_names (tuple[str, ...]): Chunk names of all chunks, flattened in order.
        asset_lines (tuple[str, ...]): One display line per asset found on disk.
        chunks_block (str): ``chunk_names`` arranged in columns.
        assets_block (str): ``asset_lines`` arranged in columns.
    """

    chunk_names: tuple[str, ...]
    asset_lines: tuple[str, ...]
    chunks_block: str
    assets_block: str


def format_asset_line(name: str, raw_kb: Decimal, gzip_kb: Decimal, theme: Theme) -> str:
    """Return ``"<name> (<raw>kb) / (<gz>kb gz)"`` with the size figures themed."""
    raw = theme.raw_size(f"({format_kb(raw_kb)}kb)")
    gz = theme.gzip_size(f"({format_kb(gzip_kb)}kb gz)")
    return f"{name} {raw} / {gz}"


def build_manifest(
    result: BuildResult,
    config: OutputConfig,
    *,
    theme: Theme,
    is_dir: Callable[[str], bool] = os.path.isdir,
    exists: Callable[[str], bool] = os.path.exists,
    layout: Callable[[Sequence[str]], str] = columns,
    gzip_sizer: Callable[[Asset, str], Decimal] | None = None,
) -> Manifest | None:
    """Build the manifest section for ``result``.

    Args:
        result (BuildResult): The build result.
        config (OutputConfig): Where the assets are expected.
        theme (Theme): Colors for the size figures.
        is_dir (Callable[[str], bool]): Output directory check; exceptions propagate.
        exists (Callable[[str], bool]): Asset file check; exceptions propagate.
        layout (Callable[[Sequence[str]], str]): Columnar layout helper.
        gzip_sizer (Callable[[Asset, str], Decimal] | None): Gzip size source;
            defaults to a `RatioGzipSizer` with the default ratio.

    Returns:
        Manifest | None: The manifest, or None if the output path is not a directory.
    """
    if not is_dir(config.output_path):
        logger.debug("Output path %s is not a directory; omitting manifest", config.output_path)
        return None

    sizer = gzip_sizer or RatioGzipSizer()

    chunk_names: tuple[str, ...] = tuple(name for chunk in result.chunks for name in chunk.names)

    asset_lines: list[str] = []
    for asset in result.assets:
        asset_path = os.path.join(config.output_path, asset.name)
        if not exists(asset_path):
            continue
        raw_kb = to_kb(asset.size)
        asset_lines.append(format_asset_line(asset.name, raw_kb, sizer(asset, asset_path), theme))

    return Manifest(
        chunk_names=chunk_names,
        asset_lines=tuple(asset_lines),
        chunks_block=layout(chunk_names),
        assets_block=layout(asset_lines),
    )
