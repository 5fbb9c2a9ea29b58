# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport package.

BuildReport renders the result of a bundler run (tool versions, hash,
errors, warnings, chunks and assets) as a terminal status block that is
repainted in place on every rebuild. It exposes a small typed API and a CLI.
"""

from __future__ import annotations

from buildreport.api import create_reporter, render
from buildreport.model import Asset, BuildResult, Chunk, OutputConfig
from buildreport.reporter.render import Report, Reporter

__all__ = [
    "Asset",
    "BuildResult",
    "Chunk",
    "OutputConfig",
    "Report",
    "Reporter",
    "create_reporter",
    "render",
]
