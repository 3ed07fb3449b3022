"""Schema validator protocol.

Schema semantics are owned by an external engine.
The core only needs a yes/no answer per schema document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from paramcheck.domain.model.schema import Schema


class SchemaValidatorProtocol(Protocol):
    """Contract for schema validators.

    Example:
        class TypeOnlyValidator:
            def validate(self, schema: Schema) -> None:
                if schema.type not in {"string", "integer"}:
                    raise InvalidSchemaError(f"unsupported type {schema.type!r}", "/type")
    """

    def validate(self, schema: Schema) -> None:
        """Validate schema document.

        Args:
            schema: Schema to check

        Raises:
            InvalidSchemaError: Schema is structurally invalid
        """
        ...
