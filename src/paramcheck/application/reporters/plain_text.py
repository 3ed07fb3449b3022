"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from paramcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from paramcheck.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check result as plain text."""
        self._write("=" * 70)
        self._write(f"Parameter Check: {result.subject}")
        self._write("=" * 70)

        self._write()
        self._write("Summary:")
        self._write(f"  Parameters: {len(result.parameters)}")
        self._write(f"  Unresolved: {len(result.unresolved)}")
        self._write(f"  Duration: {result.duration_ms:.2f} ms")
        self._write(f"  Status: {'PASS' if result.passed else 'FAIL'}")

        if result.unresolved:
            self._write()
            self._write("Unresolved references:")
            for ref in result.unresolved:
                self._write(f"  - {ref}")

        if result.error is not None:
            self._write()
            self._write("-" * 70)
            self._write(f"Error: {result.error_type}")
            self._write("-" * 70)
            self._write(f"  {result.error}")
            for key, value in self.error_details(result.error).items():
                self._write(f"  {key}: {value}")

        self._write()
        self._write("=" * 70)
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
