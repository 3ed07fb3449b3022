"""Parameter location enumeration."""

from enum import Enum


class ParameterLocation(str, Enum):
    """Where a parameter value is transmitted ('in' field).

    str mixin: members compare equal to their wire value.
    """

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if value is one of the enumerated locations (case-sensitive)."""
        return value in cls._value2member_map_
