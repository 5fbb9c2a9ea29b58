# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/reporter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report stages: metadata, counting, manifest and rendering.

Public modules:
    - buildreport.reporter.metadata
    - buildreport.reporter.counting
    - buildreport.reporter.manifest
    - buildreport.reporter.render
"""

from __future__ import annotations
