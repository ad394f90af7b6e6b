"""Output sinks for finished scans."""

from .reporter import ConsoleReporter, ListReporter, Reporter, format_report

__all__ = ["ConsoleReporter", "ListReporter", "Reporter", "format_report"]
