# topmark:header:start
#
#   project      : BuildReport
#   file         : constants.py
#   file_relpath : src/buildreport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildReport Constants."""

from __future__ import annotations

from typing import Final

# Distribution name of this package, used for the version line of the report.
BUILDREPORT_DIST_NAME: Final[str] = "buildreport"

# Default compiler shown on the second line of the report.
DEFAULT_COMPILER_NAME: Final[str] = "webpack"

# Ratio applied to the raw size to estimate the gzip size.
DEFAULT_GZIP_RATIO: Final[float] = 0.3

# Spaces between columns in the chunk and asset blocks.
DEFAULT_COLUMN_PADDING: Final[int] = 2

# Fallback layout width when the terminal size cannot be determined.
DEFAULT_TERMINAL_WIDTH: Final[int] = 80

# Seconds between two polls of the stats file in watch mode.
DEFAULT_WATCH_INTERVAL: Final[float] = 0.5

SETTINGS_FILE_NAME: Final[str] = "buildreport.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "buildreport"

LOG_LEVEL_ENV_VAR: Final[str] = "BUILDREPORT_LOG_LEVEL"

BANNER_SUCCESS: Final[str] = "The build completed successfully."
BANNER_FAILURE: Final[str] = "The build completed with errors."
