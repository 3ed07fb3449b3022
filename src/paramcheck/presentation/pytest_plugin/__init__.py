"""pytest plugin for paramcheck.

Provides fixtures for checking parameter declarations in tests:
    param_components: Raw `components` object (override in conftest.py)
    param_context: ValidationContext with default adapters
    param_checker: ParameterChecker bound to param_context
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from paramcheck.presentation.pytest_plugin.fixtures import (
    param_checker,
    param_components,
    param_context,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "param_checker",
    "param_components",
    "param_context",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "params: mark test as parameter declaration test",
    )
