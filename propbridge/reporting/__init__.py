"""Reporting module - rendering, console output and JSON reports."""

from .console import ConsoleLogger, EventRecorder
from .json_reporter import JsonReporter
from .pretty import format_summary, pretty

__all__ = [
    "ConsoleLogger",
    "EventRecorder",
    "JsonReporter",
    "format_summary",
    "pretty",
]
