"""JSON reporter for machine-readable output.

Parameters are emitted in their wire form via the codec.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from paramcheck.application.reporters._base import BaseReporter
from paramcheck.infrastructure.codec import encode_json, parameter_to_dict

if TYPE_CHECKING:
    from paramcheck.domain.model.check_result import CheckResult


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration or parsing by other tools."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check result as one JSON document.

        Raises:
            CodecError: a parameter holds a value with no JSON representation
        """
        self._output.write(encode_json(self._result_to_dict(result), indent=self._indent))
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        error: dict[str, object] | None = None
        if result.error is not None:
            error = {
                "type": result.error_type,
                "message": str(result.error),
                "details": self.error_details(result.error),
            }

        return {
            "subject": result.subject,
            "passed": result.passed,
            "duration_ms": result.duration_ms,
            "parameters": [parameter_to_dict(p) for p in result.parameters],
            "unresolved": list(result.unresolved),
            "error": error,
        }
