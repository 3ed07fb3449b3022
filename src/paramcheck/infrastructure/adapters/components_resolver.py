"""Local components resolver adapter.

Implements ReferenceResolverProtocol over an in-memory `components` object.
Supports local pointers only:
    #/components/parameters/<name>
    #/components/schemas/<name>
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from paramcheck.domain.exceptions.codec import CodecError
from paramcheck.domain.exceptions.reference import ReferenceResolutionError
from paramcheck.domain.model.schema import Schema
from paramcheck.infrastructure.codec import REF_KEY, parameter_from_dict

if TYPE_CHECKING:
    from paramcheck.domain.model.parameter import Parameter

logger = logging.getLogger(__name__)

PARAMETERS_SECTION = "parameters"
SCHEMAS_SECTION = "schemas"


def component_pointer(section: str, name: str) -> str:
    """Build local pointer, escaping per RFC 6901."""
    token = name.replace("~", "~0").replace("/", "~1")
    return f"#/components/{section}/{token}"


def _unescape(token: str) -> str:
    # RFC 6901: ~1 first, then ~0
    return token.replace("~1", "/").replace("~0", "~")


class ComponentsResolver:
    """Resolver over the `components` object of an API description.

    Follows $ref chains inside the same section. Cycles are errors.
    Stateless after construction: safe to share between validations.
    """

    def __init__(self, components: Mapping[str, object]) -> None:
        """Initialize resolver.

        Args:
            components: Raw `components` object (section -> name -> object)
        """
        if not isinstance(components, Mapping):
            raise TypeError(f"components must be a mapping, got {type(components).__name__}")
        self._components = components

    @classmethod
    def from_document(cls, document: Mapping[str, object]) -> ComponentsResolver:
        """Create resolver from a whole decoded API description."""
        components = document.get("components", {})
        if not isinstance(components, Mapping):
            raise TypeError(f"components must be a mapping, got {type(components).__name__}")
        return cls(components)

    def resolve_parameter(self, ref: str) -> Parameter:
        """Resolve parameter pointer and decode target.

        Raises:
            ReferenceResolutionError: foreign, missing, cyclic or undecodable target
        """
        data = self._follow(ref, PARAMETERS_SECTION)
        try:
            parameter = parameter_from_dict(data)
        except CodecError as e:
            raise ReferenceResolutionError(ref, f"invalid parameter object ({e})") from e
        logger.debug(f"Resolved {ref} -> {parameter.location}:{parameter.name}")
        return parameter

    def resolve_schema(self, ref: str) -> Schema:
        """Resolve schema pointer.

        Raises:
            ReferenceResolutionError: foreign, missing or cyclic pointer
        """
        data = self._follow(ref, SCHEMAS_SECTION)
        logger.debug(f"Resolved {ref}")
        return Schema(dict(data))

    def _follow(self, ref: str, section: str) -> Mapping[str, object]:
        """Follow $ref chain until a concrete object."""
        visited: list[str] = []
        current = ref

        while True:
            if current in visited:
                chain = " -> ".join([*visited, current])
                raise ReferenceResolutionError(ref, f"circular reference ({chain})")
            visited.append(current)

            data = self._lookup(current, section)
            target = data.get(REF_KEY)
            if target is None:
                return data
            if not isinstance(target, str) or not target:
                raise ReferenceResolutionError(ref, f"invalid {REF_KEY} in {current!r}")
            current = target

    def _lookup(self, ref: str, section: str) -> Mapping[str, object]:
        """Find object addressed by single-level local pointer."""
        prefix = f"#/components/{section}/"
        token = ref.removeprefix(prefix)
        if token == ref or not token or "/" in token:
            raise ReferenceResolutionError(ref, f"not a local {section} pointer")

        bucket = self._components.get(section)
        name = _unescape(token)
        if not isinstance(bucket, Mapping) or name not in bucket:
            raise ReferenceResolutionError(ref, "pointer not found")

        data = bucket[name]
        if not isinstance(data, Mapping):
            raise ReferenceResolutionError(ref, "target is not an object")
        return data
