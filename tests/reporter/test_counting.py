# topmark:header:start
#
#   project      : BuildReport
#   file         : test_counting.py
#   file_relpath : tests/reporter/test_counting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error and warning counting."""

from __future__ import annotations

import pytest

from buildreport.reporter.counting import BuildCounts, count
from tests.helpers import make_result


@pytest.mark.parametrize(
    ("errors", "warnings", "failed"),
    [
        ((), (), False),
        ((), ("w",), False),
        (("e",), (), True),
        (("e1", "e2"), ("w1", "w2", "w3"), True),
    ],
)
def test_count(errors: tuple[str, ...], warnings: tuple[str, ...], failed: bool) -> None:
    counts = count(make_result(errors=errors, warnings=warnings))

    assert counts == BuildCounts(error_count=len(errors), warning_count=len(warnings))
    assert counts.failed is failed
