# topmark:header:start
#
#   project      : BuildReport
#   file         : settings.py
#   file_relpath : src/buildreport/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporter settings and their TOML sources.

Settings are read from either file:

- ``buildreport.toml`` (keys at the top level), or
- ``pyproject.toml`` (keys in the ``[tool.buildreport]`` table).

Example:
    ```toml
    [tool.buildreport]
    compiler = "esbuild"
    output_path = "dist"
    gzip = "measure"
    column_padding = 4
    ```

`discover_settings` walks up from a directory and uses the nearest file; in a
directory holding both files, ``buildreport.toml`` wins. Relative
``output_path`` values are resolved against the directory of the file that
declares them. Parsing is done with `tomlkit`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buildreport.config.logging import get_logger
from buildreport.constants import (
    BUILDREPORT_DIST_NAME,
    DEFAULT_COLUMN_PADDING,
    DEFAULT_COMPILER_NAME,
    DEFAULT_GZIP_RATIO,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
    SETTINGS_FILE_NAME,
)
from buildreport.reporter.manifest import GzipMode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from buildreport.config.logging import BuildreportLogger

logger: BuildreportLogger = get_logger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file cannot be parsed or holds invalid values."""


@dataclass(frozen=True)
class ReporterSettings:
    """Immutable reporter settings.

    Attributes:
        reporter_name (str): Distribution shown (with its version) on the first line.
        compiler (str): Compiler name; also the distribution used for the
            version lookup when the stats document carries no version.
        output_path (str | None): Default output directory of the build.
        gzip (GzipMode): How gzip sizes are obtained.
        gzip_ratio (float): Ratio used by `GzipMode.ESTIMATE`.
        column_padding (int): Spaces between layout columns.
        width (int | None): Fixed layout width; terminal width when None.
        source (Path | None): File the settings were loaded from.
    """

    reporter_name: str = BUILDREPORT_DIST_NAME
    compiler: str = DEFAULT_COMPILER_NAME
    output_path: str | None = None
    gzip: GzipMode = GzipMode.ESTIMATE
    gzip_ratio: float = DEFAULT_GZIP_RATIO
    column_padding: int = DEFAULT_COLUMN_PADDING
    width: int | None = None
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> ReporterSettings:
        """Build settings from a TOML table.

        Args:
            data (Mapping[str, Any]): The settings table.
            base_dir (Path | None): Directory against which a relative
                ``output_path`` is resolved.

        Returns:
            ReporterSettings: The validated settings.

        Raises:
            SettingsError: If a value has the wrong type or is out of range.
        """
        known = {f.name for f in fields(cls)} - {"source"}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown setting %r", key)

        defaults = cls()
        values: dict[str, Any] = {}

        for key in ("reporter_name", "compiler"):
            if key in data:
                values[key] = _require(data, key, str)

        if "output_path" in data:
            output_path = Path(_require(data, "output_path", str))
            if base_dir is not None and not output_path.is_absolute():
                output_path = base_dir / output_path
            values["output_path"] = str(output_path)

        if "gzip" in data:
            raw = _require(data, "gzip", str)
            try:
                values["gzip"] = GzipMode(raw.lower())
            except ValueError as exc:
                choices = ", ".join(m.value for m in GzipMode)
                raise SettingsError(f"'gzip' must be one of: {choices} (got {raw!r})") from exc

        if "gzip_ratio" in data:
            ratio = data["gzip_ratio"]
            if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or ratio <= 0:
                raise SettingsError(f"'gzip_ratio' must be a positive number (got {ratio!r})")
            values["gzip_ratio"] = float(ratio)

        if "column_padding" in data:
            padding = _require(data, "column_padding", int)
            if padding < 0:
                raise SettingsError(f"'column_padding' must not be negative (got {padding})")
            values["column_padding"] = padding

        if "width" in data:
            width = _require(data, "width", int)
            if width <= 0:
                raise SettingsError(f"'width' must be positive (got {width})")
            values["width"] = width

        return replace(defaults, **values)


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data[key]
    # bool is an int subclass; reject it for numeric keys
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SettingsError(f"'{key}' must be of type {kind.__name__} (got {value!r})")
    return value


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed document as plain Python values.

    Raises:
        SettingsError: If the document is not valid TOML.
        OSError: If the file cannot be read.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SettingsError(f"{path}: invalid TOML ({exc})") from exc
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def load_settings(path: Path) -> ReporterSettings | None:
    """Load settings from ``buildreport.toml`` or ``pyproject.toml``.

    Args:
        path (Path): The settings file.

    Returns:
        ReporterSettings | None: The settings, or None for a ``pyproject.toml``
            without a ``[tool.buildreport]`` table.

    Raises:
        SettingsError: If the file is invalid.
    """
    logger.debug("Loading settings from %s", path)
    data = load_toml_dict(path)

    if path.name == PYPROJECT_FILE_NAME:
        table = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
        if table is None:
            logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
            return None
        if not isinstance(table, dict):
            raise SettingsError(f"{path}: [tool.{PYPROJECT_TOOL_SECTION}] must be a table")
        data = table

    try:
        settings = ReporterSettings.from_dict(data, base_dir=path.parent.resolve())
    except SettingsError as exc:
        raise SettingsError(f"{path}: {exc}") from exc
    settings = replace(settings, source=path)
    logger.debug("Loaded settings: %s", settings)
    return settings


def discover_settings(start: Path | None = None) -> ReporterSettings:
    """Return the settings of the nearest settings file above ``start``.

    Args:
        start (Path | None): Directory to start from; defaults to the cwd.

    Returns:
        ReporterSettings: The discovered settings, or the defaults when no
            settings file is found.
    """
    anchor = (start or Path.cwd()).resolve()
    for directory in (anchor, *anchor.parents):
        for name in (SETTINGS_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate = directory / name
            if not candidate.is_file():
                continue
            settings = load_settings(candidate)
            if settings is not None:
                return settings
    logger.debug("No settings file found above %s; using defaults", anchor)
    return ReporterSettings()
