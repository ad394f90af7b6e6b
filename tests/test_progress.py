from __future__ import annotations

from pathlib import Path

import pytest

from common.errors import CounterError, ErrorCode
from common.models import CharSequence, CountReport
from common.progress import ScanLogger, read_scan_events
from common.versioning import SCAN_EVENT_VERSION


def test_scan_logger_appends_jsonl(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "scans.jsonl"
    logger = ScanLogger(log_path)
    report = CountReport(target="d", sequence=CharSequence.from_text("load rel address"), count=3)
    logger.emit(report, profile="classic")
    logger.emit(report)

    events = read_scan_events(log_path)
    assert len(events) == 2
    first = events[0]
    assert first["version"] == SCAN_EVENT_VERSION
    assert first["profile"] == "classic"
    assert first["target"] == "d"
    assert first["target_code"] == 0x64
    assert first["text"] == "load rel address"
    assert first["length"] == 16
    assert first["count"] == 3
    assert events[1]["profile"] is None


def test_scan_logger_without_path_is_noop(tmp_path: Path) -> None:
    logger = ScanLogger(None)
    logger.emit(CountReport(target="a", sequence=CharSequence.from_text("a"), count=1))
    assert list(tmp_path.iterdir()) == []
    assert read_scan_events(tmp_path / "missing.jsonl") == []


def test_scan_logger_directory_failure_raises_io_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(CounterError) as exc:
        ScanLogger(blocker / "scans.jsonl")
    assert exc.value.code == ErrorCode.IO_ERROR
