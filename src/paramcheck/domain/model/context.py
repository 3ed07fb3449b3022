"""Validation context: pluggable collaborators for validate().

None = collaborator disabled.
schema_validator=None: schemas are opaque, accepted as-is.
resolver=None: any unresolved reference is an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from paramcheck.domain.exceptions.reference import ReferenceResolutionError

if TYPE_CHECKING:
    from paramcheck.domain.model.parameter import Parameter
    from paramcheck.domain.model.schema import Schema
    from paramcheck.domain.ports.resolver import ReferenceResolverProtocol
    from paramcheck.domain.ports.schema_validator import SchemaValidatorProtocol


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Immutable validation configuration with FAIL-FIRST validation.

    Attributes:
        schema_validator: Checks schema documents. None = disabled.
        resolver: Materializes pointers. None = unresolved refs fail.
    """

    schema_validator: SchemaValidatorProtocol | None = None
    resolver: ReferenceResolverProtocol | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.schema_validator is not None and not callable(
            getattr(self.schema_validator, "validate", None)
        ):
            raise TypeError(
                f"schema_validator must define validate(), got {type(self.schema_validator).__name__}"
            )

        if self.resolver is not None:
            for method in ("resolve_parameter", "resolve_schema"):
                if not callable(getattr(self.resolver, method, None)):
                    raise TypeError(
                        f"resolver must define {method}(), got {type(self.resolver).__name__}"
                    )

    def resolve_parameter(self, ref: str) -> Parameter:
        """Resolve parameter pointer via configured resolver."""
        if self.resolver is None:
            raise ReferenceResolutionError(ref)
        return self.resolver.resolve_parameter(ref)

    def resolve_schema(self, ref: str) -> Schema:
        """Resolve schema pointer via configured resolver."""
        if self.resolver is None:
            raise ReferenceResolutionError(ref)
        return self.resolver.resolve_schema(ref)

    def validate_schema(self, schema: Schema) -> None:
        """Hand schema to configured validator. No-op when disabled."""
        if self.schema_validator is not None:
            self.schema_validator.validate(schema)
