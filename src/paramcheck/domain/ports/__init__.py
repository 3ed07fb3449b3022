"""Domain ports (interfaces/protocols)."""

from paramcheck.domain.ports.reporter import ReporterProtocol
from paramcheck.domain.ports.resolver import ReferenceResolverProtocol
from paramcheck.domain.ports.schema_validator import SchemaValidatorProtocol

__all__ = [
    "ReferenceResolverProtocol",
    "ReporterProtocol",
    "SchemaValidatorProtocol",
]
