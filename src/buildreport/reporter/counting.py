# topmark:header:start
#
#   project      : BuildReport
#   file         : counting.py
#   file_relpath : src/buildreport/reporter/counting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error and warning counts of a build result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildreport.model import BuildResult


@dataclass(frozen=True, slots=True)
class BuildCounts:
    """Error and warning counts, and whether the build failed."""

    error_count: int
    warning_count: int

    @property
    def failed(self) -> bool:
        """A build fails iff it reported at least one error."""
        return self.error_count > 0


def count(result: BuildResult) -> BuildCounts:
    """Count the errors and warnings of ``result``."""
    return BuildCounts(error_count=len(result.errors), warning_count=len(result.warnings))
