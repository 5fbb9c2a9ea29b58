# topmark:header:start
#
#   project      : BuildReport
#   file         : watch.py
#   file_relpath : src/buildreport/watch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Poll a stats file and report every new compilation.

Bundlers in watch mode rewrite their stats file after each compilation.
`StatsWatcher` polls the file's modification time and size; when either
changes, the file is parsed and handed to a callback (typically
`Reporter.render`). Calls are strictly sequential.

A missing file is waited for. A file that cannot be parsed (e.g. caught
half-written) is logged and skipped until it changes again. Exceptions raised
by the callback are not caught.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from buildreport.config.logging import get_logger
from buildreport.constants import DEFAULT_WATCH_INTERVAL
from buildreport.model import StatsFormatError, load_stats

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from buildreport.config.logging import BuildreportLogger
    from buildreport.model import BuildResult

logger: BuildreportLogger = get_logger(__name__)


class StatsWatcher:
    """Call ``on_change`` with the parsed stats whenever the stats file changes.

    Args:
        path (Path): Stats file to watch.
        on_change (Callable[[BuildResult], object]): Receives each new build result.
        interval (float): Seconds between two polls.
        sleep (Callable[[float], None]): Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        path: Path,
        on_change: Callable[[BuildResult], object],
        *,
        interval: float = DEFAULT_WATCH_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.path = path
        self.on_change = on_change
        self.interval = interval
        self._sleep = sleep
        self._signature: tuple[int, int] | None = None
        self.reports: int = 0

    def poll(self) -> bool:
        """Check the stats file once.

        Returns:
            bool: True if a new build result was delivered to ``on_change``.
        """
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            if self._signature is not None:
                logger.debug("Stats file %s disappeared; waiting", self.path)
            self._signature = None
            return False

        signature = (stat.st_mtime_ns, stat.st_size)
        if signature == self._signature:
            return False
        self._signature = signature

        try:
            result = load_stats(self.path)
        except FileNotFoundError:
            # replaced between stat() and read
            logger.debug("Stats file %s vanished while reading; waiting", self.path)
            self._signature = None
            return False
        except StatsFormatError as exc:
            logger.warning("Skipping unreadable stats file: %s", exc)
            return False

        self.on_change(result)
        self.reports += 1
        return True

    def run(self, *, max_polls: int | None = None) -> int:
        """Poll until interrupted or until ``max_polls`` polls have been made.

        Args:
            max_polls (int | None): Stop after this many polls; None polls forever.

        Returns:
            int: Number of build results delivered.
        """
        logger.info("Watching %s every %.2fs", self.path, self.interval)
        polls = 0
        while max_polls is None or polls < max_polls:
            self.poll()
            polls += 1
            if max_polls is None or polls < max_polls:
                self._sleep(self.interval)
        return self.reports
