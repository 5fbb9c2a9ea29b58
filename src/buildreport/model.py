# topmark:header:start
#
#   project      : BuildReport
#   file         : model.py
#   file_relpath : src/buildreport/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build result and output configuration types.

The reporter consumes two read-only inputs produced by the build tool:

- `BuildResult`: hash, assets, chunks, errors and warnings of one compilation.
- `OutputConfig`: the directory the assets are written to.

Both can be built from the JSON shapes a webpack-style bundler emits
(``stats.toJson()`` and the ``output`` section of its configuration). Those
documents are only partially trusted: missing keys default to empty values,
while values of the wrong type raise `StatsFormatError`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from buildreport.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from buildreport.config.logging import BuildreportLogger

logger: BuildreportLogger = get_logger(__name__)


class StatsFormatError(ValueError):
    """Raised when a stats document does not have the expected structure."""


@dataclass(frozen=True, slots=True)
class Asset:
    """A single output file of a build.

    Attributes:
        name (str): File name, relative to the output directory.
        size (int): Size in bytes as reported by the build tool.
    """

    name: str
    size: int


@dataclass(frozen=True, slots=True)
class Chunk:
    """A named grouping of output bundles.

    Attributes:
        names (tuple[str, ...]): Declared chunk names, in declaration order.
    """

    names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of one compilation, as consumed by the reporter.

    Attributes:
        hash (str): Content hash of the compilation.
        assets (tuple[Asset, ...]): Emitted assets, in emission order.
        chunks (tuple[Chunk, ...]): Emitted chunks, in emission order.
        errors (tuple[str, ...]): Error messages.
        warnings (tuple[str, ...]): Warning messages.
        compiler_version (str | None): Compiler version embedded in the stats
            document, when the build tool provides one.
    """

    hash: str = ""
    assets: tuple[Asset, ...] = ()
    chunks: tuple[Chunk, ...] = ()
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    compiler_version: str | None = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuildResult:
        """Build a result from a webpack-style stats mapping.

        Args:
            data (Mapping[str, Any]): Parsed stats document.

        Returns:
            BuildResult: The normalized build result.

        Raises:
            StatsFormatError: If ``data`` or one of its known fields has the wrong type.
        """
        if not isinstance(data, dict):
            raise StatsFormatError(f"stats document must be an object, got {type(data).__name__}")

        assets = tuple(
            _parse_asset(item, index) for index, item in enumerate(_list_field(data, "assets"))
        )
        chunks = tuple(
            _parse_chunk(item, index) for index, item in enumerate(_list_field(data, "chunks"))
        )
        errors = tuple(_parse_message(item, "errors") for item in _list_field(data, "errors"))
        warnings = tuple(_parse_message(item, "warnings") for item in _list_field(data, "warnings"))

        version = data.get("version")
        if version is not None and not isinstance(version, str):
            raise StatsFormatError(f"'version' must be a string, got {type(version).__name__}")

        result = cls(
            hash=_str_field(data, "hash"),
            assets=assets,
            chunks=chunks,
            errors=errors,
            warnings=warnings,
            compiler_version=version,
        )
        logger.debug(
            "Parsed stats: %d asset(s), %d chunk(s), %d error(s), %d warning(s)",
            len(assets),
            len(chunks),
            len(errors),
            len(warnings),
        )
        return result


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where the build writes its assets.

    Attributes:
        output_path (str): Absolute or cwd-relative output directory.
    """

    output_path: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutputConfig:
        """Build an output configuration from a bundler-style mapping.

        Accepts ``{"output": {"path": ...}}`` or ``{"output_path": ...}``.

        Raises:
            StatsFormatError: If no output path can be found.
        """
        output = data.get("output")
        path: object = output.get("path") if isinstance(output, dict) else data.get("output_path")
        if not isinstance(path, str) or not path:
            raise StatsFormatError("output configuration has no 'output.path'")
        return cls(output_path=path)


def load_stats(path: Path) -> BuildResult:
    """Read and parse a stats JSON file.

    Args:
        path (Path): Location of the stats document.

    Returns:
        BuildResult: The parsed build result.

    Raises:
        StatsFormatError: If the file is not UTF-8 encoded JSON or not a stats document.
        OSError: If the file cannot be read.
    """
    raw = path.read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise StatsFormatError(f"{path}: not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise StatsFormatError(f"{path}: invalid JSON ({exc})") from exc
    return BuildResult.from_dict(data)


def _list_field(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise StatsFormatError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise StatsFormatError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _parse_asset(item: Any, index: int) -> Asset:
    if not isinstance(item, dict):
        raise StatsFormatError(f"assets[{index}] must be an object")
    name = item.get("name")
    size = item.get("size", 0)
    if not isinstance(name, str):
        raise StatsFormatError(f"assets[{index}].name must be a string")
    # bool is an int subclass; a flag is never a size
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise StatsFormatError(f"assets[{index}].size must be a non-negative integer")
    return Asset(name=name, size=size)


def _parse_chunk(item: Any, index: int) -> Chunk:
    if not isinstance(item, dict):
        raise StatsFormatError(f"chunks[{index}] must be an object")
    names = item.get("names") or []
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise StatsFormatError(f"chunks[{index}].names must be a list of strings")
    return Chunk(names=tuple(names))


def _parse_message(item: Any, key: str) -> str:
    # webpack 4 emits plain strings, webpack 5 emits {"message": ...} objects
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("message"), str):
        return item["message"]
    raise StatsFormatError(f"'{key}' entries must be strings or objects with a 'message'")
