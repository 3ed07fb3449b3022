"""Domain exceptions: all public errors of paramcheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from paramcheck.domain.exceptions.base import ParamCheckError
from paramcheck.domain.exceptions.codec import CodecError
from paramcheck.domain.exceptions.collection import DuplicateParameterError
from paramcheck.domain.exceptions.parameter import (
    ConflictingSchemaAndContentError,
    ContentValidationError,
    InvalidLocationError,
    InvalidNameError,
    SchemaValidationError,
)
from paramcheck.domain.exceptions.reference import ReferenceResolutionError
from paramcheck.domain.exceptions.schema import InvalidSchemaError

__all__ = [
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
]
