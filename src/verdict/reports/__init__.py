"""Reporting module for verdict progress output."""

from verdict.reports.base import Reporter
from verdict.reports.console import ConsoleReporter


__all__ = ["ConsoleReporter", "Reporter"]
