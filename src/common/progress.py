"""Structured scan logging utilities."""
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import CounterError, ErrorCode
from .models import CountReport
from .versioning import SCAN_EVENT_VERSION


class ScanLogger:
    """Writes one JSONL event per finished scan for later inspection."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        if path:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CounterError(
                    ErrorCode.IO_ERROR,
                    f"Cannot create scan log directory for '{path}'",
                    context={"path": str(path)},
                ) from exc

    def emit(self, report: CountReport, *, profile: Optional[str] = None) -> None:
        if not self.path:
            return
        payload = {
            "version": SCAN_EVENT_VERSION,
            "profile": profile,
            "target": report.target,
            "target_code": ord(report.target),
            "text": report.text,
            "length": len(report.sequence),
            "count": report.count,
            "timestamp": time.time(),
        }
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(payload))
                handle.write("\n")
        except OSError as exc:
            raise CounterError(
                ErrorCode.IO_ERROR,
                f"Cannot append scan event to '{self.path}'",
                context={"path": str(self.path)},
            ) from exc


def read_scan_events(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        return []
    events: List[Dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events
