"""Schema value object and its reference wrapper."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from paramcheck.domain.model.context import ValidationContext


@dataclass(frozen=True, slots=True)
class Schema:
    """Opaque schema document describing a value's shape.

    Never interpreted by the core; handed to SchemaValidatorProtocol.

    Attributes:
        raw: Schema document as decoded from the wire
    """

    raw: Mapping[str, object] = field(default_factory=dict)

    @classmethod
    def of_type(cls, type_name: str, **keywords: object) -> Schema:
        """Create schema with 'type' keyword and optional extra keywords."""
        return cls({"type": type_name, **keywords})

    @property
    def type(self) -> object:
        """Declared 'type' keyword, None if absent."""
        return self.raw.get("type")


@dataclass(frozen=True, slots=True)
class SchemaRef:
    """Schema reference: inline value, pointer, or both (resolved pointer).

    Attributes:
        value: Concrete schema, None while unresolved
        ref: Pointer the schema came from, None for inline schemas

    A resolved pointer (value and ref both set) serializes as the pointer
    alone, so it does not survive a wire round trip with its value.
    """

    value: Schema | None = None
    ref: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.value is None and not self.ref:
            raise ValueError("schema ref requires a value or a non-empty ref")

    def resolve(self, context: ValidationContext) -> Schema:
        """Return concrete schema, resolving the pointer if needed."""
        if self.value is not None:
            return self.value
        return context.resolve_schema(self.ref or "")

    def validate(self, context: ValidationContext | None = None) -> None:
        """Resolve and validate referenced schema.

        Raises:
            ReferenceResolutionError: Pointer cannot be resolved
            InvalidSchemaError: Schema rejected by validator
        """
        context = context if context is not None else ValidationContext()
        context.validate_schema(self.resolve(context))
