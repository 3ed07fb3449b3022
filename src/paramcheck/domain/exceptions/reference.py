"""Reference resolution exceptions."""

from paramcheck.domain.exceptions.base import ParamCheckError


class ReferenceResolutionError(ParamCheckError, LookupError):
    """Reference could not be resolved to a value.

    Inherits LookupError for semantic correctness (pointer lookup failed).

    Attributes:
        ref: Pointer that failed
        reason: Why resolution failed
    """

    def __init__(self, ref: str, reason: str = "found unresolved ref") -> None:
        """Initialize with pointer and reason."""
        self.ref = ref
        self.reason = reason
        super().__init__(f"{reason}: {ref!r}")
