"""Centralized version constants for persisted scan artifacts."""
from __future__ import annotations

SCAN_EVENT_VERSION = "1.0.0"
CONFIG_DOCUMENT_VERSION = 1
