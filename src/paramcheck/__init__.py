"""paramcheck - OpenAPI parameter model and validation."""

__version__ = "0.1.0"

from paramcheck.application.services import ParameterChecker
from paramcheck.domain.exceptions import ParamCheckError
from paramcheck.domain.model import (
    Parameter,
    ParameterCollection,
    ValidationContext,
    new_cookie_parameter,
    new_header_parameter,
    new_parameters,
    new_path_parameter,
    new_query_parameter,
)

__all__ = [
    "Parameter",
    "ParameterChecker",
    "ParameterCollection",
    "ParamCheckError",
    "ValidationContext",
    "__version__",
    "new_cookie_parameter",
    "new_header_parameter",
    "new_parameters",
    "new_path_parameter",
    "new_query_parameter",
]
