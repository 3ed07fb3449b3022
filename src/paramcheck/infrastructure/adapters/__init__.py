"""Infrastructure adapters implementing domain ports."""

from paramcheck.infrastructure.adapters.components_resolver import (
    ComponentsResolver,
    component_pointer,
)
from paramcheck.infrastructure.adapters.jsonschema_validator import JSONSchemaValidator

__all__ = [
    "ComponentsResolver",
    "JSONSchemaValidator",
    "component_pointer",
]
