# topmark:header:start
#
#   project      : BuildReport
#   file         : options.py
#   file_relpath : src/buildreport/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

This module centralizes reusable options (verbosity, color, report inputs) so
the group and its commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buildreport.cli.errors import BuildreportUsageError
from buildreport.config.logging import TRACE_LEVEL
from buildreport.reporter.manifest import GzipMode

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override: Parsed ``--color`` value; None means "not provided".
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level, or None when neither flag is given (the
        environment then decides).

    Raises:
        BuildreportUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuildreportUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostic logging (on stderr). Repeat up to three times.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Silence diagnostic logging.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def report_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the stats argument and the options shared by ``report`` and ``watch``."""
    f = click.argument(
        "stats_file",
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)
    f = click.option(
        "-o",
        "--output-path",
        "output_path",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory the build writes its assets to (overrides the settings file).",
    )(f)
    f = click.option(
        "-c",
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Settings file (buildreport.toml or pyproject.toml). Discovered when omitted.",
    )(f)
    f = click.option(
        "--compiler",
        default=None,
        help="Compiler name shown in the report (overrides the settings file).",
    )(f)
    f = click.option(
        "--gzip",
        "gzip_mode",
        type=click.Choice([m.value for m in GzipMode], case_sensitive=False),
        default=None,
        help="Gzip size: estimate from the raw size, or measure the files on disk.",
    )(f)
    f = click.option(
        "--status",
        "status_message",
        default=None,
        help="Message printed after the banner.",
    )(f)
    return f
