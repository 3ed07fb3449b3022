"""Media type descriptor and content mapping."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.schema import Schema, SchemaRef

JSON_MEDIA_TYPE = "application/json"


@dataclass(slots=True)
class MediaType:
    """Media type descriptor used by Content.

    Attributes:
        schema: Schema of the serialized value
        example: Illustrative value, opaque
        examples: Named examples, opaque
        encoding: Per-property encoding, opaque
        extensions: Unrecognized wire fields
    """

    schema: SchemaRef | None = None
    example: object = None
    examples: dict[str, object] = field(default_factory=dict)
    encoding: dict[str, object] = field(default_factory=dict)
    extensions: dict[str, object] = field(default_factory=dict)

    def validate(self, context: ValidationContext | None = None) -> None:
        """Validate schema if present."""
        if self.schema is not None:
            self.schema.validate(context)


@dataclass(slots=True)
class Content:
    """Mapping media type string -> MediaType.

    Used instead of a schema when serialization depends on content type.
    Insertion order is preserved.
    """

    media_types: dict[str, MediaType] = field(default_factory=dict)

    @classmethod
    def with_json_schema(cls, schema: Schema) -> Content:
        """Create application/json content carrying schema."""
        return cls({JSON_MEDIA_TYPE: MediaType(schema=SchemaRef(value=schema))})

    def __len__(self) -> int:
        return len(self.media_types)

    def __iter__(self) -> Iterator[str]:
        return iter(self.media_types)

    def __contains__(self, media_type: object) -> bool:
        return media_type in self.media_types

    def get(self, media_type: str) -> MediaType | None:
        """Get descriptor by exact media type, None if absent."""
        return self.media_types.get(media_type)

    def validate(self, context: ValidationContext | None = None) -> None:
        """Validate every descriptor in insertion order. Fail-fast."""
        for media_type in self.media_types.values():
            media_type.validate(context)
