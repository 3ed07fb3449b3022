"""Main facade for parameter checking.

ParameterChecker runs collection validation with a configured context
and turns the fail-fast exception into a CheckResult value.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Self

from paramcheck.domain.exceptions.base import ParamCheckError
from paramcheck.domain.exceptions.reference import ReferenceResolutionError
from paramcheck.domain.model.check_result import CheckResult
from paramcheck.domain.model.collection import ParameterCollection
from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.reference import UnresolvedParameter
from paramcheck.infrastructure.adapters.components_resolver import ComponentsResolver
from paramcheck.infrastructure.adapters.jsonschema_validator import JSONSchemaValidator

if TYPE_CHECKING:
    from paramcheck.domain.model.parameter import Parameter
    from paramcheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class ParameterChecker:
    """Main facade for parameter checking.

    Composition-based: accepts validation context and reporter.

    Factory methods:
    - with_defaults(): jsonschema meta-schema check, optional components resolver

    Example:
        checker = ParameterChecker.with_defaults(document["components"])
        result = checker.check(parameters, subject="GET /pets/{id}")
        if not result.passed:
            print(result.error)
    """

    def __init__(
        self,
        context: ValidationContext | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            context: Validation collaborators (empty context if None)
            reporter: Optional reporter called after every check
        """
        self._context = context if context is not None else ValidationContext()
        self._reporter = reporter

    @classmethod
    def with_defaults(
        cls,
        components: Mapping[str, object] | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker with default adapters.

        Args:
            components: Raw `components` object. None = references not resolvable.
            reporter: Optional reporter

        Returns:
            ParameterChecker with JSONSchemaValidator and ComponentsResolver
        """
        resolver = ComponentsResolver(components) if components is not None else None
        context = ValidationContext(schema_validator=JSONSchemaValidator(), resolver=resolver)
        return cls(context, reporter=reporter)

    @property
    def context(self) -> ValidationContext:
        """Validation context used by every check."""
        return self._context

    def check(self, parameters: ParameterCollection, subject: str = "parameters") -> CheckResult:
        """Validate collection and return result.

        Only ParamCheckError is converted; anything else propagates.

        Args:
            parameters: Collection to validate
            subject: Label for reporting, e.g. "GET /pets/{id}"

        Returns:
            CheckResult with first error found (or none)
        """
        start_time = time.perf_counter()
        error: ParamCheckError | None = None

        try:
            parameters.validate(self._context)
        except ParamCheckError as e:
            error = e
            logger.debug(f"{subject}: {type(e).__name__}: {e}")

        duration_ms = (time.perf_counter() - start_time) * 1000

        result = CheckResult(
            subject=subject,
            parameters=self._materialize(parameters),
            unresolved=tuple(item.ref for item in parameters if isinstance(item, UnresolvedParameter)),
            error=error,
            duration_ms=duration_ms,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def check_parameter(self, parameter: Parameter, subject: str | None = None) -> CheckResult:
        """Validate single parameter as a one-member collection."""
        parameters = ParameterCollection()
        parameters.append_parameter(parameter)
        return self.check(parameters, subject or f"{parameter.location}:{parameter.name}")

    def check_all(self, operations: Mapping[str, ParameterCollection]) -> tuple[CheckResult, ...]:
        """Validate several collections, one result per subject, in mapping order."""
        results = tuple(self.check(parameters, subject) for subject, parameters in operations.items())
        failed = sum(1 for r in results if not r.passed)
        logger.debug(f"Checked {len(results)} collection(s), {failed} failed")
        return results

    def _materialize(self, parameters: ParameterCollection) -> tuple[Parameter, ...]:
        """Members in order, references resolved through the context.

        Members whose pointer does not resolve are left out; they stay
        listed in CheckResult.unresolved.
        """
        materialized: list[Parameter] = []
        for item in parameters:
            try:
                materialized.append(item.resolve(self._context))
            except ReferenceResolutionError:
                continue
        return tuple(materialized)
