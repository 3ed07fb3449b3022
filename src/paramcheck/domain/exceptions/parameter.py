"""Parameter validation exceptions."""

from __future__ import annotations

from paramcheck.domain.exceptions.base import ParamCheckError


class InvalidNameError(ParamCheckError, ValueError):
    """Parameter name is blank.

    Attributes:
        location: 'in' value of the nameless parameter (may itself be invalid)
    """

    def __init__(self, location: str) -> None:
        """Initialize with location of offending parameter."""
        self.location = location
        super().__init__("parameter name can't be blank")


class InvalidLocationError(ParamCheckError, ValueError):
    """Parameter 'in' value is not path, query, header or cookie.

    Attributes:
        name: Parameter name
        location: Rejected 'in' value
    """

    def __init__(self, name: str, location: str) -> None:
        """Initialize with parameter name and rejected location."""
        self.name = name
        self.location = location
        super().__init__(f"parameter {name!r} can't have 'in' value {location!r}")


class ConflictingSchemaAndContentError(ParamCheckError, ValueError):
    """Parameter declares both schema and content.

    Attributes:
        name: Parameter name
    """

    def __init__(self, name: str) -> None:
        """Initialize with parameter name."""
        self.name = name
        super().__init__(f"parameter {name!r} cannot contain both schema and content")


class SchemaValidationError(ParamCheckError):
    """Parameter schema failed validation.

    Wraps the nested error with the owning parameter name.
    Preserves original traceback via __cause__.

    Attributes:
        name: Parameter name
        original: Nested error raised by schema validation
    """

    def __init__(self, name: str, original: ParamCheckError) -> None:
        """Initialize with parameter name and nested error."""
        self.name = name
        self.original = original
        super().__init__(f"parameter {name!r} schema is invalid: {original}")
        self.__cause__ = original


class ContentValidationError(ParamCheckError):
    """Parameter content failed validation.

    Attributes:
        name: Parameter name
        original: Nested error raised by content validation
    """

    def __init__(self, name: str, original: ParamCheckError) -> None:
        """Initialize with parameter name and nested error."""
        self.name = name
        self.original = original
        super().__init__(f"parameter {name!r} content is invalid: {original}")
        self.__cause__ = original
