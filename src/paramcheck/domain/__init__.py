"""paramcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from paramcheck.domain.exceptions import (
    CodecError,
    ConflictingSchemaAndContentError,
    ContentValidationError,
    DuplicateParameterError,
    InvalidLocationError,
    InvalidNameError,
    InvalidSchemaError,
    ParamCheckError,
    ReferenceResolutionError,
    SchemaValidationError,
)
from paramcheck.domain.model import (
    CheckResult,
    Content,
    MediaType,
    Parameter,
    ParameterCollection,
    ParameterLocation,
    ResolvedParameter,
    Schema,
    SchemaRef,
    UnresolvedParameter,
    ValidationContext,
)

__all__ = [
    # Exceptions
    "ParamCheckError",
    "InvalidNameError",
    "InvalidLocationError",
    "ConflictingSchemaAndContentError",
    "SchemaValidationError",
    "ContentValidationError",
    "InvalidSchemaError",
    "DuplicateParameterError",
    "ReferenceResolutionError",
    "CodecError",
    # Model
    "Parameter",
    "ParameterCollection",
    "ParameterLocation",
    "ResolvedParameter",
    "UnresolvedParameter",
    "Schema",
    "SchemaRef",
    "MediaType",
    "Content",
    "ValidationContext",
    "CheckResult",
]
