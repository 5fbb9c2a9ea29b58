# topmark:header:start
#
#   project      : BuildReport
#   file         : report.py
#   file_relpath : src/buildreport/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport `report` command.

Renders one status report for a stats file and exits with ``BUILD_FAILED``
when the build reported errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildreport.cli.cmd_common import build_reporter, read_stats, resolve_settings
from buildreport.cli.exit_codes import ExitCode
from buildreport.cli.options import report_options

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="report",
    help="Render the build report for STATS_FILE (a bundler stats JSON document).",
)
@report_options
@click.pass_context
def report_command(
    ctx: click.Context,
    *,
    stats_file: Path,
    output_path: Path | None,
    config_file: Path | None,
    compiler: str | None,
    gzip_mode: str | None,
    status_message: str | None,
) -> None:
    """Render the report once and exit with the build outcome."""
    settings, output_config = resolve_settings(
        config_file,
        output_path=output_path,
        compiler=compiler,
        gzip_mode=gzip_mode,
    )
    result = read_stats(stats_file)
    reporter = build_reporter(ctx, settings, result)

    failed = reporter.render(result, output_config, status_message)
    ctx.exit(ExitCode.BUILD_FAILED if failed else ExitCode.SUCCESS)
