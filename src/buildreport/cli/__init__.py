# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for BuildReport."""

from __future__ import annotations
