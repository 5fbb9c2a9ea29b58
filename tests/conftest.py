# topmark:header:start
#
#   project      : BuildReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration and fixtures for the BuildReport test suite.

Reporter fixtures wire a `Reporter` to fakes (see `tests.helpers`): a recording
sink, a tagging theme, fixed tool versions (``buildreport: 9.9.9``,
``typescript: 1.1.1``) and a bracket layout.
"""

from __future__ import annotations

import logging as std_logging
from typing import TYPE_CHECKING

import pytest

from buildreport.config import logging
from buildreport.model import OutputConfig
from buildreport.reporter.metadata import StaticCompiler, VersionResolver
from buildreport.reporter.render import Reporter
from tests.helpers import TAG_THEME, RecordingSink, bracket_layout

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from buildreport.rendering.theme import Theme


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings from leaking into the tests."""
    for name in ("BUILDREPORT_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging setup done by CLI invocations."""
    root = std_logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so diagnostics show up in failure reports."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def tag_theme() -> Theme:
    return TAG_THEME


@pytest.fixture
def fake_versions() -> VersionResolver:
    return VersionResolver(
        StaticCompiler("typescript", "1.1.1"),
        read_version=lambda _name: "9.9.9",
    )


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """Output directory holding ``assetOne.js`` (but not ``assetTwo.js``)."""
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "assetOne.js").write_text("console.log('assetOne');\n", encoding="utf-8")
    return dist


@pytest.fixture
def output_config(dist_dir: Path) -> OutputConfig:
    return OutputConfig(output_path=str(dist_dir))


@pytest.fixture
def reporter(sink: RecordingSink, tag_theme: Theme, fake_versions: VersionResolver) -> Reporter:
    return Reporter(
        versions=fake_versions,
        sink=sink,
        theme=tag_theme,
        layout=bracket_layout,
    )
