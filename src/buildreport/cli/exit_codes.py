# topmark:header:start
#
#   project      : BuildReport
#   file         : exit_codes.py
#   file_relpath : src/buildreport/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BuildReport CLI.

BuildReport aligns with the BSD `sysexits` convention where practical, so that
build scripts can tell a failed build (``BUILD_FAILED``) apart from a problem
with the reporter's own inputs.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BuildReport CLI.

    Attributes:
        SUCCESS: The report was rendered and the build has no errors.
        BUILD_FAILED: The report was rendered and the build has errors.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        STATS_ERROR: The stats document is malformed. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading an input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Settings error (invalid TOML or values). Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    BUILD_FAILED = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    STATS_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
