"""Parameter entity: a single named input of an API operation."""

from __future__ import annotations

from dataclasses import dataclass, field

from paramcheck.domain.exceptions.base import ParamCheckError
from paramcheck.domain.exceptions.parameter import (
    ConflictingSchemaAndContentError,
    ContentValidationError,
    InvalidLocationError,
    InvalidNameError,
    SchemaValidationError,
)
from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.location import ParameterLocation
from paramcheck.domain.model.media_type import Content
from paramcheck.domain.model.schema import Schema, SchemaRef


@dataclass(slots=True)
class Parameter:
    """OpenAPI parameter declaration.

    Mutable only through builder setters before use.
    Invariants are checked by validate(), not at construction,
    so invalid definitions can be held and reported.

    Attributes:
        name: Identifier, unique within location among siblings
        location: 'in' value: path, query, header or cookie
        description: Free text
        style: Serialization style hint, opaque
        allow_empty_value: allowEmptyValue flag
        allow_reserved: allowReserved flag
        deprecated: deprecated flag
        required: required flag
        schema: Value schema, exclusive with content
        example: Illustrative value, opaque
        examples: Named examples, opaque
        content: Media type mapping, exclusive with schema
        extensions: Unrecognized wire fields (x-* and others)
    """

    name: str = ""
    location: str = ""
    description: str = ""
    style: str = ""
    allow_empty_value: bool = False
    allow_reserved: bool = False
    deprecated: bool = False
    required: bool = False
    schema: SchemaRef | None = None
    example: object = None
    examples: dict[str, object] = field(default_factory=dict)
    content: Content | None = None
    extensions: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize empty content to None: an empty mapping is not set."""
        if self.content is not None and not self.content:
            self.content = None

    def with_description(self, value: str) -> Parameter:
        """Set description, return self for chaining."""
        self.description = value
        return self

    def with_required(self, value: bool) -> Parameter:
        """Set required flag, return self for chaining."""
        self.required = value
        return self

    def with_schema(self, value: Schema | None) -> Parameter:
        """Set inline schema, return self for chaining.

        None clears the schema instead of wrapping it.
        """
        if value is None:
            self.schema = None
        else:
            self.schema = SchemaRef(value=value)
        return self

    def validate(self, context: ValidationContext | None = None) -> None:
        """Validate parameter. Fail-fast, pure.

        Order: name, location, schema/content exclusivity, schema, content.

        Raises:
            InvalidNameError: name is empty
            InvalidLocationError: location not enumerated
            ConflictingSchemaAndContentError: both schema and content set
            SchemaValidationError: nested schema failed
            ContentValidationError: nested content failed
        """
        if not self.name:
            raise InvalidNameError(self.location)

        if not ParameterLocation.is_valid(self.location):
            raise InvalidLocationError(self.name, self.location)

        if self.schema is not None and self.content:
            raise ConflictingSchemaAndContentError(self.name)

        if self.schema is not None:
            try:
                self.schema.validate(context)
            except ParamCheckError as e:
                raise SchemaValidationError(self.name, e) from e

        if self.content:
            try:
                self.content.validate(context)
            except ParamCheckError as e:
                raise ContentValidationError(self.name, e) from e


def new_path_parameter(name: str) -> Parameter:
    """Create path parameter. Path parameters are always required."""
    return Parameter(name=name, location=ParameterLocation.PATH.value, required=True)


def new_query_parameter(name: str) -> Parameter:
    """Create query parameter."""
    return Parameter(name=name, location=ParameterLocation.QUERY.value)


def new_header_parameter(name: str) -> Parameter:
    """Create header parameter."""
    return Parameter(name=name, location=ParameterLocation.HEADER.value)


def new_cookie_parameter(name: str) -> Parameter:
    """Create cookie parameter."""
    return Parameter(name=name, location=ParameterLocation.COOKIE.value)
