"""Reporters for boundary check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from archbound.application.reporters.console import ConsoleConfig, ConsoleReporter
from archbound.application.reporters.json_reporter import JSONReporter
from archbound.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
