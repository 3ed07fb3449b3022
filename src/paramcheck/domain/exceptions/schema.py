"""Schema exceptions."""

from paramcheck.domain.exceptions.base import ParamCheckError


class InvalidSchemaError(ParamCheckError, ValueError):
    """Schema document is structurally invalid.

    Raised by schema validator adapters.

    Attributes:
        reason: Why schema is invalid (must not be empty)
        path: JSON pointer of the offending keyword, "" for the root
    """

    def __init__(self, reason: str, path: str = "") -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        self.path = path
        if path:
            super().__init__(f"{reason} at {path!r}")
        else:
            super().__init__(reason)
