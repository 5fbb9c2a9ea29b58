# topmark:header:start
#
#   project      : BuildReport
#   file         : main.py
#   file_relpath : src/buildreport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport command group.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the console and the color state from there.
Tests may pre-seed ``ctx.obj`` (e.g. with a ``sink``) through
``CliRunner.invoke(obj=...)``.
"""

from __future__ import annotations

import click

from buildreport.cli.commands.report import report_command
from buildreport.cli.commands.version import version_command
from buildreport.cli.commands.watch import watch_command
from buildreport.cli.console import ClickConsole
from buildreport.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from buildreport.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    log_level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))
    logger.debug("CLI state: log_level=%s color=%s", log_level, enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render bundler results as a build status report.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the BuildReport CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'buildreport report STATS_FILE -o DIST' to render a report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(report_command)

cli.add_command(watch_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
