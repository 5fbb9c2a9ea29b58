# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal presentation helpers for BuildReport.

This package holds the pieces of the report that know about terminals
(symbols, colors, column layout, in-place repaint), so the report stages
stay independent of any styling library.

Public modules:
    - buildreport.rendering.columns
    - buildreport.rendering.repaint
    - buildreport.rendering.symbols
    - buildreport.rendering.theme
"""

from __future__ import annotations
