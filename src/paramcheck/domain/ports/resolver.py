"""Reference resolver protocol.

Turns a pointer ("#/components/parameters/limit") into a concrete value.
Resolution errors surface unchanged through validate().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from paramcheck.domain.model.parameter import Parameter
    from paramcheck.domain.model.schema import Schema


class ReferenceResolverProtocol(Protocol):
    """Contract for reference resolvers."""

    def resolve_parameter(self, ref: str) -> Parameter:
        """Resolve pointer to a Parameter.

        Raises:
            ReferenceResolutionError: Pointer is broken or foreign
        """
        ...

    def resolve_schema(self, ref: str) -> Schema:
        """Resolve pointer to a Schema.

        Raises:
            ReferenceResolutionError: Pointer is broken or foreign
        """
        ...
