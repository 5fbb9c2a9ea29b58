# topmark:header:start
#
#   project      : BuildReport
#   file         : test_stats_watcher.py
#   file_relpath : tests/watch/test_stats_watcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stats file polling."""

from __future__ import annotations

import json
import logging
import os
from typing import TYPE_CHECKING

import pytest

from buildreport.model import load_stats
from buildreport.watch import StatsWatcher

if TYPE_CHECKING:
    from pathlib import Path

    from buildreport.model import BuildResult


def _write_stats(path: Path, build_hash: str, *, mtime_ns: int) -> None:
    path.write_text(json.dumps({"hash": build_hash}), encoding="utf-8")
    os.utime(path, ns=(mtime_ns, mtime_ns))


@pytest.fixture
def received() -> list[BuildResult]:
    return []


def test_poll_reports_each_change_once(tmp_path: Path, received: list[BuildResult]) -> None:
    stats = tmp_path / "stats.json"
    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)
    watcher = StatsWatcher(stats, received.append)

    assert watcher.poll() is True
    assert watcher.poll() is False

    _write_stats(stats, "bbb", mtime_ns=2_000_000_000)
    assert watcher.poll() is True

    assert [r.hash for r in received] == ["aaa", "bbb"]
    assert watcher.reports == 2


def test_poll_waits_for_missing_file(tmp_path: Path, received: list[BuildResult]) -> None:
    stats = tmp_path / "stats.json"
    watcher = StatsWatcher(stats, received.append)

    assert watcher.poll() is False

    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)
    assert watcher.poll() is True

    stats.unlink()
    assert watcher.poll() is False
    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)
    assert watcher.poll() is True
    assert len(received) == 2


def test_poll_skips_unparsable_file(
    tmp_path: Path, received: list[BuildResult], caplog: pytest.LogCaptureFixture
) -> None:
    stats = tmp_path / "stats.json"
    stats.write_text("{", encoding="utf-8")
    watcher = StatsWatcher(stats, received.append)

    with caplog.at_level(logging.WARNING):
        assert watcher.poll() is False
    assert "Skipping unreadable stats file" in caplog.text

    _write_stats(stats, "fixed", mtime_ns=3_000_000_000)
    assert watcher.poll() is True
    assert received[0].hash == "fixed"


def test_poll_propagates_callback_errors(tmp_path: Path) -> None:
    stats = tmp_path / "stats.json"
    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)

    def explode(result: BuildResult) -> None:
        raise RuntimeError(result.hash)

    with pytest.raises(RuntimeError, match="aaa"):
        StatsWatcher(stats, explode).poll()


def test_run_sleeps_between_polls(tmp_path: Path, received: list[BuildResult]) -> None:
    stats = tmp_path / "stats.json"
    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)
    naps: list[float] = []

    watcher = StatsWatcher(stats, received.append, interval=0.25, sleep=naps.append)

    assert watcher.run(max_polls=3) == 1
    assert naps == [0.25, 0.25]


@pytest.mark.parametrize("interval", [0, -1.0])
def test_rejects_non_positive_interval(tmp_path: Path, interval: float) -> None:
    with pytest.raises(ValueError, match="interval must be positive"):
        StatsWatcher(tmp_path / "stats.json", print, interval=interval)


def test_poll_skips_file_cut_inside_multibyte_character(
    tmp_path: Path, received: list[BuildResult]
) -> None:
    """A write caught mid-character is skipped like any other half-written file."""
    stats = tmp_path / "stats.json"
    stats.write_bytes('{"hash": "h", "errors": ["café'.encode()[:-1])
    watcher = StatsWatcher(stats, received.append)

    assert watcher.poll() is False

    _write_stats(stats, "complete", mtime_ns=4_000_000_000)
    assert watcher.poll() is True
    assert received[0].hash == "complete"


def test_poll_waits_when_file_vanishes_before_read(
    tmp_path: Path, received: list[BuildResult], monkeypatch: pytest.MonkeyPatch
) -> None:
    stats = tmp_path / "stats.json"
    _write_stats(stats, "aaa", mtime_ns=1_000_000_000)

    attempts: list[Path] = []

    def replaced_once(path: Path) -> BuildResult:
        attempts.append(path)
        if len(attempts) == 1:
            raise FileNotFoundError(path)
        return load_stats(path)

    monkeypatch.setattr("buildreport.watch.load_stats", replaced_once)
    watcher = StatsWatcher(stats, received.append)

    assert watcher.poll() is False
    assert received == []

    assert watcher.poll() is True
    assert received[0].hash == "aaa"
