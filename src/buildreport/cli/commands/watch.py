# topmark:header:start
#
#   project      : BuildReport
#   file         : watch.py
#   file_relpath : src/buildreport/cli/commands/watch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport `watch` command.

Repaints the report every time the bundler rewrites its stats file, until
interrupted with Ctrl-C. The exit code reflects the last reported build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildreport.api import default_sink
from buildreport.cli.cmd_common import build_reporter, resolve_settings
from buildreport.cli.exit_codes import ExitCode
from buildreport.cli.options import report_options
from buildreport.config.logging import get_logger
from buildreport.constants import DEFAULT_WATCH_INTERVAL
from buildreport.watch import StatsWatcher

if TYPE_CHECKING:
    from pathlib import Path

    from buildreport.config.logging import BuildreportLogger
    from buildreport.model import BuildResult
    from buildreport.rendering.repaint import Sink

logger: BuildreportLogger = get_logger(__name__)


@click.command(
    name="watch",
    help="Repaint the build report whenever STATS_FILE changes.",
)
@report_options
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_WATCH_INTERVAL,
    show_default=True,
    help="Seconds between two checks of the stats file.",
)
@click.option(
    "--max-polls",
    type=click.IntRange(min=1),
    default=None,
    hidden=True,
    help="Stop after this many checks (used by tests).",
)
@click.pass_context
def watch_command(
    ctx: click.Context,
    *,
    stats_file: Path,
    output_path: Path | None,
    config_file: Path | None,
    compiler: str | None,
    gzip_mode: str | None,
    status_message: str | None,
    interval: float,
    max_polls: int | None,
) -> None:
    """Watch the stats file and repaint the report on each change."""
    settings, output_config = resolve_settings(
        config_file,
        output_path=output_path,
        compiler=compiler,
        gzip_mode=gzip_mode,
    )
    message = status_message or f"watching {stats_file} ..."
    state: dict[str, bool] = {"failed": False}
    sink: Sink = (ctx.find_root().obj or {}).get("sink") or default_sink()

    def on_change(result: BuildResult) -> None:
        # The compiler version may change between two builds; rewire every time.
        reporter = build_reporter(ctx, settings, result, sink=sink)
        state["failed"] = reporter.render(result, output_config, message)

    watcher = StatsWatcher(stats_file, on_change, interval=interval)
    try:
        watcher.run(max_polls=max_polls)
    except KeyboardInterrupt:
        logger.info("Watch interrupted")
    finally:
        done = getattr(sink, "done", None)
        if callable(done):
            done()

    ctx.exit(ExitCode.BUILD_FAILED if state["failed"] else ExitCode.SUCCESS)
