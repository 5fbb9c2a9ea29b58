# topmark:header:start
#
#   project      : BuildReport
#   file         : __init__.py
#   file_relpath : src/buildreport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for BuildReport.

Public modules:
    - buildreport.config.logging
    - buildreport.config.settings
"""

from __future__ import annotations
