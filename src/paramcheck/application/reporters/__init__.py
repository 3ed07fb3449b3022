"""Reporters for parameter check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from paramcheck.application.reporters._base import BaseReporter
from paramcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from paramcheck.application.reporters.json_reporter import JSONReporter
from paramcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
