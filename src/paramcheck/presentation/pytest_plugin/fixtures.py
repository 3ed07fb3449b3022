"""pytest fixtures for parameter checking.

User overrides param_components or param_context in their conftest.py.
"""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from paramcheck.application.services import ParameterChecker
from paramcheck.domain.model.context import ValidationContext
from paramcheck.infrastructure.adapters.components_resolver import ComponentsResolver
from paramcheck.infrastructure.adapters.jsonschema_validator import JSONSchemaValidator


@pytest.fixture(scope="session")
def param_components() -> Mapping[str, object] | None:
    """Raw `components` object used to resolve references.

    User overrides this fixture in their conftest.py.

    Returns:
        None (references not resolvable)
    """
    return None


@pytest.fixture(scope="session")
def param_context(param_components: Mapping[str, object] | None) -> ValidationContext:
    """Validation context with jsonschema meta-schema check.

    Returns:
        ValidationContext with JSONSchemaValidator, plus ComponentsResolver
        when param_components is provided
    """
    resolver = ComponentsResolver(param_components) if param_components is not None else None
    return ValidationContext(schema_validator=JSONSchemaValidator(), resolver=resolver)


@pytest.fixture
def param_checker(param_context: ValidationContext) -> ParameterChecker:
    """ParameterChecker bound to param_context."""
    return ParameterChecker(param_context)
