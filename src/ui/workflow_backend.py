"""Backend workflow shared by the CLI and the DearPyGui window."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from common.config import load_runtime_config
from common.models import CharSequence, CountReport, GlobalSettings
from common.progress import ScanLogger
from core.counting import CharacterCounter
from core.reporting import Reporter
from storage import record_scan


def run_count(
    target: str,
    text: str,
    *,
    reporter: Reporter,
    settings: Optional[GlobalSettings] = None,
    counter: Optional[CharacterCounter] = None,
    scan_log: Optional[ScanLogger] = None,
    sqlite_db: Optional[Path] = None,
    profile: Optional[str] = None,
) -> CountReport:
    """Scan ``text`` for ``target`` and hand the finished report to ``reporter``.

    The scan completes before any output happens; logging, persistence and
    reporting only see the final count.
    """

    settings = settings or GlobalSettings()
    counter = counter or CharacterCounter()
    sequence = CharSequence.from_text(text)
    count = counter.count(target, sequence)
    report = CountReport(
        target=target,
        sequence=sequence,
        count=count,
        prefix_message=settings.prefix_message,
        suffix_message=settings.suffix_message,
    )
    if scan_log:
        scan_log.emit(report, profile=profile)
    if sqlite_db:
        record_scan(sqlite_db, report, profile=profile, audit_action="count")
    reporter.emit(report)
    return report


def run_profile(
    profile: str,
    *,
    reporter: Reporter,
    config_path: Optional[Path] = None,
    scan_log: Optional[ScanLogger] = None,
    sqlite_db: Optional[Path] = None,
) -> CountReport:
    """Run the fixed literals stored in a configuration profile."""

    runtime = load_runtime_config(profile, config_path=config_path)
    return run_count(
        runtime.profile.target,
        runtime.profile.string,
        reporter=reporter,
        settings=runtime.global_settings,
        scan_log=scan_log,
        sqlite_db=sqlite_db,
        profile=profile,
    )
