"""Ordered parameter collection of one operation or components bucket."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from paramcheck.domain.exceptions.collection import DuplicateParameterError
from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.parameter import Parameter
from paramcheck.domain.model.reference import ParameterRef, ResolvedParameter


@dataclass(slots=True)
class ParameterCollection:
    """Ordered sequence of parameter references.

    Order drives lookup priority and error ordering.
    Unresolved members are invisible to lookup().

    Attributes:
        items: Members in declaration order
    """

    items: list[ParameterRef] = field(default_factory=list)

    def __iter__(self) -> Iterator[ParameterRef]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def append(self, item: ParameterRef) -> None:
        """Append member reference."""
        self.items.append(item)

    def append_parameter(self, parameter: Parameter) -> None:
        """Append inline parameter."""
        self.items.append(ResolvedParameter(parameter))

    def resolved(self) -> Iterator[Parameter]:
        """Iterate resolved parameters in order, skipping unresolved members."""
        for item in self.items:
            match item:
                case ResolvedParameter(value=parameter):
                    yield parameter

    def lookup(self, location: str, name: str) -> Parameter | None:
        """Find first resolved parameter by exact (location, name).

        Returns:
            Matching parameter, None if not found
        """
        for parameter in self.resolved():
            if parameter.location == location and parameter.name == name:
                return parameter
        return None

    def validate(self, context: ValidationContext | None = None) -> None:
        """Validate every member once, then (location, name) uniqueness.

        Unresolved members are resolved through context.resolver and then
        count toward uniqueness like inline ones. Fail-fast: first error wins.

        Raises:
            ReferenceResolutionError: member cannot be resolved
            DuplicateParameterError: (location, name) repeated
            ParamCheckError: any error from Parameter.validate()
        """
        context = context if context is not None else ValidationContext()
        seen: set[tuple[str, str]] = set()

        for item in self.items:
            parameter = item.resolve(context)
            parameter.validate(context)

            key = (parameter.location, parameter.name)
            if key in seen:
                raise DuplicateParameterError(parameter.location, parameter.name)
            seen.add(key)


def new_parameters() -> ParameterCollection:
    """Create empty collection."""
    return ParameterCollection()
