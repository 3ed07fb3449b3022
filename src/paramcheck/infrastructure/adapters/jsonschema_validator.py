"""JSON Schema meta-schema validator adapter.

Implements SchemaValidatorProtocol with the jsonschema library.
Checks schema documents against the meta-schema only, never instances.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from paramcheck.domain.exceptions.schema import InvalidSchemaError

if TYPE_CHECKING:
    from jsonschema.protocols import Validator

    from paramcheck.domain.model.schema import Schema

logger = logging.getLogger(__name__)


class JSONSchemaValidator:
    """Schema validator backed by a jsonschema meta-schema.

    Default draft is 2020-12 (the dialect of OpenAPI 3.1).
    Unknown keywords (nullable, discriminator, x-*) are accepted.
    """

    def __init__(self, validator_class: type[Validator] = Draft202012Validator) -> None:
        """Initialize validator.

        Args:
            validator_class: jsonschema validator class whose META_SCHEMA is used
        """
        self._validator_class = validator_class

    def validate(self, schema: Schema) -> None:
        """Check schema against meta-schema.

        Raises:
            InvalidSchemaError: schema violates meta-schema
        """
        try:
            self._validator_class.check_schema(dict(schema.raw))
        except SchemaError as e:
            path = "".join(f"/{part}" for part in e.path)
            logger.debug(f"Schema rejected at {path or '/'}: {e.message}")
            raise InvalidSchemaError(e.message, path) from e
