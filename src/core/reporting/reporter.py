"""Render count reports as the classic one-line sentence."""
from __future__ import annotations

import sys
from typing import List, Optional, Protocol, TextIO

from common.models import CountReport


class Reporter(Protocol):
    def emit(self, report: CountReport) -> None:
        ...


def format_report(report: CountReport) -> str:
    """Count, prefix, target, suffix, then the original string, in that order."""

    return (
        f"{report.count}{report.prefix_message}{report.target}"
        f"{report.suffix_message}{report.text}"
    )


class ConsoleReporter:
    """Writes each report as one line to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def emit(self, report: CountReport) -> None:
        stream = self.stream or sys.stdout
        stream.write(format_report(report))
        stream.write("\n")


class ListReporter:
    """Keeps reports in memory; used by the GUI log and tests."""

    def __init__(self) -> None:
        self.reports: List[CountReport] = []

    def emit(self, report: CountReport) -> None:
        self.reports.append(report)

    @property
    def lines(self) -> List[str]:
        return [format_report(report) for report in self.reports]
