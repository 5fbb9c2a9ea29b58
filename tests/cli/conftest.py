# topmark:header:start
#
#   project      : BuildReport
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BuildReport in a controlled working directory.

`run_cli_in()` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so settings discovery starts from the temporary test
directory and never picks up the developer's own files. Reports are captured
by a `RecordingSink` injected through Click's context object.
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from buildreport.cli.exit_codes import ExitCode
from buildreport.cli.main import cli
from tests.helpers import RecordingSink

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

STATS: dict[str, Any] = {
    "version": "5.90.1",
    "hash": "abc123",
    "assets": [{"name": "main.js", "size": 1000}],
    "chunks": [{"names": ["main"]}],
    "errors": [],
    "warnings": [],
}


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    sink: RecordingSink | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector.
        sink (RecordingSink | None): Sink injected into ``ctx.obj``; when None,
            reports go to the runner's stdout.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv), obj={"sink": sink} if sink is not None else None)
    finally:
        os.chdir(cwd)


def write_stats(path: Path, **overrides: Any) -> Path:
    """Write a stats document (``STATS`` updated with ``overrides``) to ``path``."""
    path.write_text(json.dumps({**STATS, **overrides}), encoding="utf-8")
    return path


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == expected, (
        f"expected {expected!r}, got {result.exit_code}\n{result.output}"
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with ``dist/main.js`` and ``stats.json``."""
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "main.js").write_text("export {};\n", encoding="utf-8")
    write_stats(tmp_path / "stats.json")
    return tmp_path
