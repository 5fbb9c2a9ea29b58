# topmark:header:start
#
#   project      : BuildReport
#   file         : errors.py
#   file_relpath : src/buildreport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BuildReport CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. A failed *build* is not an error: it is reported
    through the ``BUILD_FAILED`` exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buildreport.cli.exit_codes import ExitCode


class BuildreportError(click.ClickException):
    """Base class for all BuildReport CLI errors."""

    exit_code = ExitCode.BUILD_FAILED

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class BuildreportUsageError(BuildreportError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BuildreportStatsError(BuildreportError):
    """Error for stats documents that cannot be parsed."""

    exit_code = ExitCode.STATS_ERROR


class BuildreportFileNotFoundError(BuildreportError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BuildreportIOError(BuildreportError):
    """Error for I/O errors reading an input file."""

    exit_code = ExitCode.IO_ERROR


class BuildreportConfigError(BuildreportError):
    """Error for invalid settings files."""

    exit_code = ExitCode.CONFIG_ERROR
