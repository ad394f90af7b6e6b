"""CLI shell for counting characters in fixed strings."""
from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

from common.config import DEFAULT_PROFILE, load_runtime_config
from common.errors import CounterError
from common.progress import ScanLogger
from common.text import describe_char, parse_target
from core.reporting import ConsoleReporter
from storage import fetch_scans, init_sqlite
from ui.workflow_backend import run_count, run_profile


def command_demo(args: argparse.Namespace) -> None:
    config_path = Path(args.config) if args.config else None
    report = run_profile(
        args.profile,
        reporter=ConsoleReporter(),
        config_path=config_path,
        scan_log=ScanLogger(Path(args.scan_log) if args.scan_log else None),
        sqlite_db=Path(args.sqlite_db) if args.sqlite_db else None,
    )
    print(f"[demo] profile={args.profile} target={describe_char(report.target)} count={report.count}")


def command_count(args: argparse.Namespace) -> None:
    config_path = Path(args.config) if args.config else None
    runtime = load_runtime_config(args.profile, config_path=config_path)
    target = parse_target(args.target)
    text = args.text if args.text is not None else runtime.profile.string
    run_count(
        target,
        text,
        reporter=ConsoleReporter(),
        settings=runtime.global_settings,
        scan_log=ScanLogger(Path(args.scan_log) if args.scan_log else None),
        sqlite_db=Path(args.sqlite_db) if args.sqlite_db else None,
        profile=args.profile,
    )


def command_history(args: argparse.Namespace) -> None:
    records = fetch_scans(Path(args.sqlite_db), limit=args.limit)
    if not records:
        print(f"[history] no scans recorded in {args.sqlite_db}")
        return
    for record in records:
        stamp = datetime.fromtimestamp(record.created_at, tz=timezone.utc).isoformat(timespec="seconds")
        print(
            f"[history] #{record.id} {stamp} profile={record.profile or '-'} "
            f"target={describe_char(record.target)} count={record.count} text={record.text!r}"
        )


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charcount", description="Count occurrences of a character in a terminator-ended string"
    )
    subparsers = parser.add_subparsers(dest="command")

    demo = subparsers.add_parser("demo", help="Run the fixed target/string literals of a profile")
    demo.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile from the bundled defaults.json (e.g., classic, letter_l)",
    )
    demo.add_argument("--config", help="Override path to the configuration JSON")
    demo.add_argument("--scan-log", help="Path to JSONL file for structured scan events")
    demo.add_argument("--sqlite-db", help="Optional SQLite file to record the scan + audit log")
    demo.set_defaults(func=command_demo)

    count = subparsers.add_parser("count", help="Count one character in a string")
    count.add_argument("target", help="Character to count: 'l', hex literal 'x6C' or decimal '#108'")
    count.add_argument(
        "text",
        nargs="?",
        help="String to scan (defaults to the profile string)",
    )
    count.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile supplying messages and the default string",
    )
    count.add_argument("--config", help="Override path to the configuration JSON")
    count.add_argument("--scan-log", help="Path to JSONL file for structured scan events")
    count.add_argument("--sqlite-db", help="Optional SQLite file to record the scan + audit log")
    count.set_defaults(func=command_count)

    history = subparsers.add_parser("history", help="List scans recorded in a SQLite file")
    history.add_argument("--sqlite-db", required=True, help="SQLite file written by --sqlite-db")
    history.add_argument("--limit", type=positive_int, default=20, help="Maximum number of scans to list")
    history.set_defaults(func=command_history)

    return parser


def maybe_initialize_sqlite(sqlite_arg: str | None) -> None:
    if not sqlite_arg:
        return
    init_sqlite(Path(sqlite_arg))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        maybe_initialize_sqlite(getattr(args, "sqlite_db", None))
        args.func(args)
    except CounterError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
