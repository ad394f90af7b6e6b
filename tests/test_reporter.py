from __future__ import annotations

import io

from common.models import CharSequence, CountReport
from core.reporting import ConsoleReporter, ListReporter, format_report


def _report(target: str = "d", text: str = "load rel address", count: int = 3) -> CountReport:
    return CountReport(target=target, sequence=CharSequence.from_text(text), count=count)


def test_format_report_orders_pieces() -> None:
    assert format_report(_report()) == "3 occurrences of the letter 'd' in the string load rel address"


def test_format_report_uses_custom_messages() -> None:
    report = CountReport(
        target="a",
        sequence=CharSequence.from_text("aaaa"),
        count=4,
        prefix_message=" x ",
        suffix_message=" in ",
    )
    assert format_report(report) == "4 x a in aaaa"


def test_console_reporter_writes_line() -> None:
    stream = io.StringIO()
    ConsoleReporter(stream).emit(_report())
    assert stream.getvalue() == "3 occurrences of the letter 'd' in the string load rel address\n"


def test_console_reporter_defaults_to_stdout(capsys) -> None:
    ConsoleReporter().emit(_report(target="z", count=0))
    captured = capsys.readouterr()
    assert captured.out.startswith("0 occurrences of the letter 'z'")


def test_list_reporter_collects_reports() -> None:
    reporter = ListReporter()
    reporter.emit(_report())
    reporter.emit(_report(target="l", count=2))
    assert [r.count for r in reporter.reports] == [3, 2]
    assert reporter.lines[1].startswith("2 occurrences of the letter 'l'")
