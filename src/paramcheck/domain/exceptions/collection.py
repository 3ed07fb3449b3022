"""Parameter collection exceptions."""

from paramcheck.domain.exceptions.base import ParamCheckError


class DuplicateParameterError(ParamCheckError, ValueError):
    """Two resolved parameters share (location, name).

    Attributes:
        location: Shared 'in' value
        name: Shared parameter name
    """

    def __init__(self, location: str, name: str) -> None:
        """Initialize with duplicated location and name."""
        self.location = location
        self.name = name
        super().__init__(f"more than one {location!r} parameter has name {name!r}")
