"""Parameter reference: explicit resolved/unresolved variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class ResolvedParameter:
    """Collection member holding a concrete Parameter.

    Attributes:
        value: Materialized parameter
        ref: Pointer the value was resolved from, None for inline
    """

    value: Parameter
    ref: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.value is None:
            raise TypeError("value must not be None")

    def resolve(self, context: ValidationContext) -> Parameter:  # noqa: ARG002
        """Return held parameter."""
        return self.value


@dataclass(frozen=True, slots=True)
class UnresolvedParameter:
    """Collection member pointing elsewhere, not yet materialized.

    Attributes:
        ref: Pointer, e.g. "#/components/parameters/limit"
    """

    ref: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.ref:
            raise ValueError("ref must not be empty")

    def resolve(self, context: ValidationContext) -> Parameter:
        """Resolve pointer via context resolver.

        Raises:
            ReferenceResolutionError: no resolver, or pointer broken
        """
        return context.resolve_parameter(self.ref)


ParameterRef: TypeAlias = ResolvedParameter | UnresolvedParameter
