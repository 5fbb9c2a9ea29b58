# topmark:header:start
#
#   project      : BuildReport
#   file         : __main__.py
#   file_relpath : src/buildreport/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BuildReport via ``python -m buildreport``.

Examples:
    Render one report::

        python -m buildreport report stats.json --output-path dist
"""

from __future__ import annotations

from buildreport.cli.main import cli

if __name__ == "__main__":
    cli()
