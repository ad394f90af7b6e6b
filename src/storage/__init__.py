"""Scan history providers (SQLite)."""

from .sqlite_store import initialize as init_sqlite
from .sqlite_store import (
	fetch_audit_events,
	fetch_scans,
	record_scan,
)

__all__ = [
	"init_sqlite",
	"record_scan",
	"fetch_scans",
	"fetch_audit_events",
]
