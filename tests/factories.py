"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from paramcheck.domain.exceptions.reference import ReferenceResolutionError
from paramcheck.domain.exceptions.schema import InvalidSchemaError
from paramcheck.domain.model.check_result import CheckResult
from paramcheck.domain.model.collection import ParameterCollection
from paramcheck.domain.model.media_type import Content
from paramcheck.domain.model.parameter import Parameter
from paramcheck.domain.model.reference import (
    ParameterRef,
    ResolvedParameter,
    UnresolvedParameter,
)
from paramcheck.domain.model.schema import Schema

# Default schema - consistent across all tests
STRING_SCHEMA = Schema({"type": "string"})


def make_parameter(
    name: str = "id",
    location: str = "query",
    *,
    schema: Schema | None = None,
    content: Content | None = None,
    required: bool = False,
) -> Parameter:
    """Create a Parameter for tests.

    Args:
        name: Parameter name (default "id")
        location: 'in' value (default "query")
        schema: Optional inline schema
        content: Optional content mapping
        required: Required flag

    Returns:
        Parameter instance
    """
    parameter = Parameter(name=name, location=location, required=required, content=content)
    return parameter.with_schema(schema)


def make_collection(*items: Parameter | ParameterRef) -> ParameterCollection:
    """Create a ParameterCollection, wrapping bare Parameters as resolved.

    Args:
        items: Parameters or references, in order

    Returns:
        ParameterCollection instance
    """
    collection = ParameterCollection()
    for item in items:
        if isinstance(item, Parameter):
            collection.append_parameter(item)
        else:
            collection.append(item)
    return collection


def make_unresolved(name: str = "limit") -> UnresolvedParameter:
    """Create UnresolvedParameter pointing into components.parameters."""
    return UnresolvedParameter(f"#/components/parameters/{name}")


def make_resolved(parameter: Parameter, ref: str | None = None) -> ResolvedParameter:
    """Create ResolvedParameter."""
    return ResolvedParameter(parameter, ref)


def make_check_result(
    subject: str = "GET /pets",
    *,
    parameters: tuple[Parameter, ...] = (),
    unresolved: tuple[str, ...] = (),
    error: Exception | None = None,
    duration_ms: float = 1.5,
) -> CheckResult:
    """Create CheckResult for reporter tests."""
    return CheckResult(
        subject=subject,
        parameters=parameters,
        unresolved=unresolved,
        error=error,  # type: ignore[arg-type]
        duration_ms=duration_ms,
    )


class RecordingSchemaValidator:
    """SchemaValidatorProtocol stub: records schemas, rejects listed types."""

    def __init__(self, reject_types: frozenset[str] = frozenset()) -> None:
        self.seen: list[Schema] = []
        self._reject_types = reject_types

    def validate(self, schema: Schema) -> None:
        self.seen.append(schema)
        if schema.type in self._reject_types:
            raise InvalidSchemaError(f"type {schema.type!r} rejected", "/type")


class DictResolver:
    """ReferenceResolverProtocol stub backed by plain dicts."""

    def __init__(
        self,
        parameters: dict[str, Parameter] | None = None,
        schemas: dict[str, Schema] | None = None,
    ) -> None:
        self.parameters = parameters or {}
        self.schemas = schemas or {}
        self.calls: list[str] = []

    def resolve_parameter(self, ref: str) -> Parameter:
        self.calls.append(ref)
        if ref not in self.parameters:
            raise ReferenceResolutionError(ref, "pointer not found")
        return self.parameters[ref]

    def resolve_schema(self, ref: str) -> Schema:
        self.calls.append(ref)
        if ref not in self.schemas:
            raise ReferenceResolutionError(ref, "pointer not found")
        return self.schemas[ref]
