"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paramcheck.domain.exceptions.base import ParamCheckError
    from paramcheck.domain.model.check_result import CheckResult

# Error attributes worth surfacing, in display order
_ERROR_DETAILS = ("location", "name", "ref", "reason", "path", "field")


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"{result.subject}: {'PASS' if result.passed else 'FAIL'}")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> object:
        """Report check result.

        Args:
            result: Outcome of one checker run
        """

    @staticmethod
    def error_details(error: ParamCheckError) -> dict[str, str]:
        """Collect known error attributes, outermost error first.

        Wrapped errors (SchemaValidationError, ContentValidationError)
        contribute their own attributes; nested ones appear under `cause`.
        """
        details: dict[str, str] = {}
        for attr in _ERROR_DETAILS:
            value = getattr(error, attr, None)
            if isinstance(value, str) and value:
                details[attr] = value

        original = getattr(error, "original", None)
        if original is not None:
            details["cause"] = f"{type(original).__name__}: {original}"
        return details
