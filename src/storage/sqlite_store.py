"""SQLite persistence for scan history and audit trails."""
from __future__ import annotations

import sqlite3
import time
from pathlib import Path
from typing import List, Optional, Tuple

from common.errors import CounterError, ErrorCode
from common.models import CountReport, ScanRecord
from common.text import describe_char


SCHEMA_MIGRATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version INTEGER PRIMARY KEY,
    applied_at REAL NOT NULL
)
"""

MIGRATIONS: List[tuple[int, List[str]]] = [
    (
        1,
        [
            """
            CREATE TABLE IF NOT EXISTS scans (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                target TEXT NOT NULL,
                text TEXT NOT NULL,
                count INTEGER NOT NULL,
                profile TEXT,
                created_at REAL NOT NULL
            )
            """,
            """
            CREATE INDEX IF NOT EXISTS idx_scans_created_at ON scans(created_at)
            """,
            """
            CREATE TABLE IF NOT EXISTS audit_log (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                entity TEXT NOT NULL,
                action TEXT NOT NULL,
                detail TEXT,
                created_at REAL NOT NULL
            )
            """,
        ],
    ),
]


def initialize(db_path: Path) -> None:
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(db_path) as conn:
            _apply_migrations(conn)
    except (sqlite3.Error, OSError) as exc:
        raise _storage_error(db_path, "initialize", exc) from exc


def record_scan(
    db_path: Path,
    report: CountReport,
    *,
    profile: Optional[str] = None,
    audit_action: Optional[str] = None,
) -> int:
    """Store one scan and return its row id.

    With ``audit_action`` the matching audit entry is written in the same
    transaction, so a scan row never exists without its audit line.
    """

    initialize(db_path)
    try:
        with sqlite3.connect(db_path) as conn:
            cursor = conn.execute(
                "INSERT INTO scans(target, text, count, profile, created_at) VALUES (?, ?, ?, ?, ?)",
                (report.target, report.text, report.count, profile, time.time()),
            )
            scan_id = int(cursor.lastrowid)
            if audit_action:
                conn.execute(
                    "INSERT INTO audit_log(entity, action, detail, created_at) VALUES (?, ?, ?, ?)",
                    (
                        "scan",
                        audit_action,
                        f"id={scan_id} target={describe_char(report.target)} count={report.count}",
                        time.time(),
                    ),
                )
    except sqlite3.Error as exc:
        raise _storage_error(db_path, "record scan", exc) from exc
    return scan_id


def fetch_scans(db_path: Path, *, limit: Optional[int] = None) -> List[ScanRecord]:
    """Most recent scans first."""

    initialize(db_path)
    query = "SELECT id, target, text, count, profile, created_at FROM scans ORDER BY id DESC"
    params: Tuple[int, ...] = ()
    if limit is not None:
        query += " LIMIT ?"
        params = (limit,)
    try:
        with sqlite3.connect(db_path) as conn:
            rows = conn.execute(query, params).fetchall()
    except sqlite3.Error as exc:
        raise _storage_error(db_path, "read scans", exc) from exc
    return [
        ScanRecord(
            id=int(row_id),
            target=str(target),
            text=str(text),
            count=int(count),
            profile=profile,
            created_at=float(created_at),
        )
        for row_id, target, text, count, profile, created_at in rows
    ]


def fetch_audit_events(db_path: Path) -> List[Tuple[str, str, Optional[str]]]:
    initialize(db_path)
    try:
        with sqlite3.connect(db_path) as conn:
            rows = conn.execute("SELECT entity, action, detail FROM audit_log ORDER BY id").fetchall()
    except sqlite3.Error as exc:
        raise _storage_error(db_path, "read audit log", exc) from exc
    return [(str(entity), str(action), detail) for entity, action, detail in rows]


def _storage_error(db_path: Path, action: str, exc: Exception) -> CounterError:
    return CounterError(
        ErrorCode.IO_ERROR,
        f"Cannot {action} in SQLite file '{db_path}': {exc}",
        context={"path": str(db_path)},
    )


def _apply_migrations(conn: sqlite3.Connection) -> None:
    conn.execute(SCHEMA_MIGRATIONS_TABLE)
    applied_versions = {
        row[0]
        for row in conn.execute("SELECT version FROM schema_migrations")
    }
    for version, statements in sorted(MIGRATIONS, key=lambda item: item[0]):
        if version in applied_versions:
            continue
        for statement in statements:
            conn.execute(statement)
        conn.execute(
            "INSERT INTO schema_migrations(version, applied_at) VALUES (?, ?)",
            (version, time.time()),
        )
        conn.commit()
