# topmark:header:start
#
#   project      : BuildReport
#   file         : cmd_common.py
#   file_relpath : src/buildreport/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plumbing shared by the ``report`` and ``watch`` commands.

These helpers translate input problems (missing stats file, malformed JSON,
invalid settings) into CLI errors with proper exit codes, and wire a reporter
from the settings and the group-level color state. Exceptions raised by the
reporter itself are not translated.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import click

from buildreport.api import compiler_for, create_reporter
from buildreport.cli.errors import (
    BuildreportConfigError,
    BuildreportFileNotFoundError,
    BuildreportIOError,
    BuildreportStatsError,
    BuildreportUsageError,
)
from buildreport.config.logging import get_logger
from buildreport.config.settings import SettingsError, discover_settings, load_settings
from buildreport.model import OutputConfig, StatsFormatError, load_stats
from buildreport.reporter.manifest import GzipMode

if TYPE_CHECKING:
    from pathlib import Path

    from buildreport.config.logging import BuildreportLogger
    from buildreport.config.settings import ReporterSettings
    from buildreport.model import BuildResult
    from buildreport.rendering.repaint import Sink
    from buildreport.reporter.render import Reporter

logger: BuildreportLogger = get_logger(__name__)


def resolve_settings(
    config_file: Path | None,
    *,
    output_path: Path | None,
    compiler: str | None,
    gzip_mode: str | None,
) -> tuple[ReporterSettings, OutputConfig]:
    """Load the settings and apply the command-line overrides.

    Returns:
        tuple[ReporterSettings, OutputConfig]: The effective settings and output location.

    Raises:
        BuildreportFileNotFoundError: If ``config_file`` does not exist.
        BuildreportConfigError: If the settings file is invalid.
        BuildreportUsageError: If no output path is configured anywhere.
    """
    try:
        if config_file is not None:
            if not config_file.is_file():
                raise BuildreportFileNotFoundError(f"Settings file not found: {config_file}")
            settings = load_settings(config_file)
            if settings is None:
                raise BuildreportConfigError(f"{config_file} has no [tool.buildreport] table")
        else:
            settings = discover_settings()
    except SettingsError as exc:
        raise BuildreportConfigError(str(exc)) from exc

    overrides: dict[str, object] = {}
    if output_path is not None:
        overrides["output_path"] = str(output_path)
    if compiler:
        overrides["compiler"] = compiler
    if gzip_mode:
        overrides["gzip"] = GzipMode(gzip_mode.lower())
    settings = replace(settings, **overrides)

    if not settings.output_path:
        raise BuildreportUsageError(
            "No output path: pass --output-path or set 'output_path' in the settings file."
        )
    logger.debug("Effective settings: %s", settings)
    return settings, OutputConfig(output_path=settings.output_path)


def read_stats(stats_file: Path) -> BuildResult:
    """Load the stats document, translating failures into CLI errors."""
    try:
        return load_stats(stats_file)
    except FileNotFoundError as exc:
        raise BuildreportFileNotFoundError(f"Stats file not found: {stats_file}") from exc
    except StatsFormatError as exc:
        raise BuildreportStatsError(f"{stats_file}: {exc}") from exc
    except OSError as exc:
        raise BuildreportIOError(f"Cannot read {stats_file}: {exc}") from exc


def build_reporter(
    ctx: click.Context,
    settings: ReporterSettings,
    result: BuildResult | None,
    *,
    sink: Sink | None = None,
) -> Reporter:
    """Create a reporter honoring the group-level color state in ``ctx.obj``."""
    obj = ctx.find_root().obj or {}
    return create_reporter(
        settings,
        compiler=compiler_for(result, settings),
        sink=sink or obj.get("sink"),
        enable_color=bool(obj.get("color_enabled", False)),
    )
