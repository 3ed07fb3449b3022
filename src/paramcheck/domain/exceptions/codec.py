"""Serialization codec exceptions."""

from paramcheck.domain.exceptions.base import ParamCheckError


class CodecError(ParamCheckError, ValueError):
    """Wire representation cannot be mapped to the model.

    Attributes:
        field: Wire key that failed ("" for the whole object)
        reason: Why mapping failed
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize with wire key and reason."""
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"field {field!r}: {reason}")
        else:
            super().__init__(reason)
