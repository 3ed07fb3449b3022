"""paramcheck application layer.

Services wiring domain validation to infrastructure adapters,
and reporters presenting check results.
"""

from paramcheck.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from paramcheck.application.services import ParameterChecker

__all__ = [
    "ParameterChecker",
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
