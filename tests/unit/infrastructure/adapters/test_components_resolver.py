"""Tests for infrastructure/adapters/components_resolver.py."""

import pytest

from paramcheck.domain.exceptions.reference import ReferenceResolutionError
from paramcheck.domain.model.parameter import new_query_parameter
from paramcheck.domain.model.schema import Schema, SchemaRef
from paramcheck.infrastructure.adapters.components_resolver import (
    ComponentsResolver,
    component_pointer,
)

COMPONENTS: dict[str, object] = {
    "parameters": {
        "limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}},
        "alias": {"$ref": "#/components/parameters/limit"},
        "loopA": {"$ref": "#/components/parameters/loopB"},
        "loopB": {"$ref": "#/components/parameters/loopA"},
        "broken": {"name": "x", "in": "query", "required": "yes"},
        "scalar": "not an object",
        "a/b": {"name": "slash", "in": "header"},
    },
    "schemas": {
        "Name": {"type": "string"},
        "Alias": {"$ref": "#/components/schemas/Name"},
    },
}


@pytest.fixture
def resolver() -> ComponentsResolver:
    """Resolver over the shared components fixture."""
    return ComponentsResolver(COMPONENTS)


class TestComponentPointer:
    """Tests for component_pointer()."""

    def test_plain_name(self) -> None:
        assert component_pointer("parameters", "limit") == "#/components/parameters/limit"

    def test_escapes_tilde_and_slash(self) -> None:
        assert component_pointer("schemas", "a~b/c") == "#/components/schemas/a~0b~1c"


class TestComponentsResolverCreation:
    """Tests for construction."""

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(TypeError, match="components must be a mapping"):
            ComponentsResolver([])  # type: ignore[arg-type]

    def test_from_document(self) -> None:
        resolver = ComponentsResolver.from_document({"openapi": "3.1.0", "components": COMPONENTS})
        assert resolver.resolve_schema("#/components/schemas/Name") == Schema({"type": "string"})

    def test_from_document_without_components(self) -> None:
        resolver = ComponentsResolver.from_document({"openapi": "3.1.0"})
        with pytest.raises(ReferenceResolutionError, match="pointer not found"):
            resolver.resolve_schema("#/components/schemas/Name")


class TestResolveParameter:
    """Tests for resolve_parameter()."""

    def test_direct(self, resolver: ComponentsResolver) -> None:
        param = resolver.resolve_parameter("#/components/parameters/limit")
        assert param.name == "limit"
        assert param.schema == SchemaRef(value=Schema({"type": "integer"}))

    def test_follows_chain(self, resolver: ComponentsResolver) -> None:
        param = resolver.resolve_parameter("#/components/parameters/alias")
        assert param.name == "limit"

    def test_escaped_name(self, resolver: ComponentsResolver) -> None:
        param = resolver.resolve_parameter(component_pointer("parameters", "a/b"))
        assert param.name == "slash"

    def test_returns_fresh_instances(self, resolver: ComponentsResolver) -> None:
        first = resolver.resolve_parameter("#/components/parameters/limit")
        first.with_description("changed")
        second = resolver.resolve_parameter("#/components/parameters/limit")
        assert second.description == ""

    def test_cycle_raises(self, resolver: ComponentsResolver) -> None:
        with pytest.raises(ReferenceResolutionError) as exc_info:
            resolver.resolve_parameter("#/components/parameters/loopA")
        assert exc_info.value.ref == "#/components/parameters/loopA"
        assert exc_info.value.reason.startswith("circular reference")
        assert "loopB" in exc_info.value.reason

    def test_missing_raises(self, resolver: ComponentsResolver) -> None:
        with pytest.raises(ReferenceResolutionError, match="pointer not found"):
            resolver.resolve_parameter("#/components/parameters/offset")

    def test_undecodable_target_raises(self, resolver: ComponentsResolver) -> None:
        with pytest.raises(ReferenceResolutionError, match="invalid parameter object") as exc_info:
            resolver.resolve_parameter("#/components/parameters/broken")
        assert exc_info.value.__cause__ is not None

    def test_scalar_target_raises(self, resolver: ComponentsResolver) -> None:
        with pytest.raises(ReferenceResolutionError, match="target is not an object"):
            resolver.resolve_parameter("#/components/parameters/scalar")

    @pytest.mark.parametrize(
        "ref",
        [
            "#/components/schemas/Name",
            "#/components/parameters/",
            "#/components/parameters/a/b",
            "other.yaml#/components/parameters/limit",
            "https://example.com/api.yaml#/components/parameters/limit",
        ],
    )
    def test_foreign_pointer_raises(self, resolver: ComponentsResolver, ref: str) -> None:
        with pytest.raises(ReferenceResolutionError, match="not a local parameters pointer"):
            resolver.resolve_parameter(ref)

    def test_equal_to_inline_definition(self, resolver: ComponentsResolver) -> None:
        expected = new_query_parameter("limit").with_schema(Schema({"type": "integer"}))
        assert resolver.resolve_parameter("#/components/parameters/limit") == expected


class TestResolveSchema:
    """Tests for resolve_schema()."""

    def test_follows_chain(self, resolver: ComponentsResolver) -> None:
        assert resolver.resolve_schema("#/components/schemas/Alias") == Schema({"type": "string"})

    def test_parameter_pointer_rejected(self, resolver: ComponentsResolver) -> None:
        with pytest.raises(ReferenceResolutionError, match="not a local schemas pointer"):
            resolver.resolve_schema("#/components/parameters/limit")

    def test_invalid_ref_value_raises(self) -> None:
        resolver = ComponentsResolver({"schemas": {"Bad": {"$ref": 5}}})
        with pytest.raises(ReferenceResolutionError, match="invalid \\$ref"):
            resolver.resolve_schema("#/components/schemas/Bad")
