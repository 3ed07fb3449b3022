"""Domain model: parameter entities and value objects."""

from paramcheck.domain.model.check_result import CheckResult
from paramcheck.domain.model.collection import ParameterCollection, new_parameters
from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.location import ParameterLocation
from paramcheck.domain.model.media_type import JSON_MEDIA_TYPE, Content, MediaType
from paramcheck.domain.model.parameter import (
    Parameter,
    new_cookie_parameter,
    new_header_parameter,
    new_path_parameter,
    new_query_parameter,
)
from paramcheck.domain.model.reference import (
    ParameterRef,
    ResolvedParameter,
    UnresolvedParameter,
)
from paramcheck.domain.model.schema import Schema, SchemaRef

__all__ = [
    # Entities
    "Parameter",
    "ParameterCollection",
    # Value objects
    "ParameterLocation",
    "Schema",
    "SchemaRef",
    "MediaType",
    "Content",
    "JSON_MEDIA_TYPE",
    "ResolvedParameter",
    "UnresolvedParameter",
    "ParameterRef",
    "ValidationContext",
    "CheckResult",
    # Constructors
    "new_parameters",
    "new_path_parameter",
    "new_query_parameter",
    "new_header_parameter",
    "new_cookie_parameter",
]
