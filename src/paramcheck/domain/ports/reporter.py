"""Reporter protocol for output formatting.

Users extend paramcheck by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from paramcheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    paramcheck provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class CountReporter:
            def report(self, result: CheckResult) -> None:
                print(f"{result.subject}: {len(result.parameters)} parameter(s)")
    """

    def report(self, result: CheckResult) -> object:
        """Report check result.

        Implementation decides output format and destination.

        Args:
            result: Outcome of one checker run
        """
        ...
