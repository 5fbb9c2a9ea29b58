# topmark:header:start
#
#   project      : BuildReport
#   file         : version.py
#   file_relpath : src/buildreport/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport `version` command.

Prints the BuildReport version as installed in the active Python environment,
and optionally the version of a compiler distribution as the report would
show it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from buildreport.constants import BUILDREPORT_DIST_NAME
from buildreport.reporter.metadata import (
    InstalledCompiler,
    StaticCompiler,
    VersionResolver,
)

if TYPE_CHECKING:
    from buildreport.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of BuildReport.",
)
@click.option(
    "--compiler",
    default=None,
    help="Also show the installed version of this compiler distribution.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the versions as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, compiler: str | None, as_json: bool) -> None:
    """Show the BuildReport version (and a compiler version on request)."""
    console: ClickConsole = ctx.find_root().obj["console"]

    handle = InstalledCompiler(compiler) if compiler else StaticCompiler("")
    versions = VersionResolver(handle).resolve()

    if as_json:
        payload: dict[str, str | None] = {BUILDREPORT_DIST_NAME: versions.reporter_version}
        if compiler:
            payload[compiler] = versions.compiler_version
        console.print(json.dumps(payload))
        return

    if not compiler:
        console.print(console.styled(versions.reporter_version, bold=True))
        return

    console.print(f"{BUILDREPORT_DIST_NAME}: {console.styled(versions.reporter_version, bold=True)}")
    console.print(f"{compiler}: {console.styled(str(versions.compiler_version), bold=True)}")
