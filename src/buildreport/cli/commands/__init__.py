# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport CLI subcommands."""

from __future__ import annotations
