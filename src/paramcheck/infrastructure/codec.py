"""Wire codec: Parameter <-> JSON/YAML object.

Explicit field tables, no reflection:
- fields at their default value are omitted on encode
- unknown keys are captured in `extensions` on decode, merged back on encode
- {"$ref": ...} objects decode to unresolved references
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TypeVar

import yaml

from paramcheck.domain.exceptions.codec import CodecError
from paramcheck.domain.model.collection import ParameterCollection
from paramcheck.domain.model.media_type import Content, MediaType
from paramcheck.domain.model.parameter import Parameter
from paramcheck.domain.model.reference import (
    ParameterRef,
    ResolvedParameter,
    UnresolvedParameter,
)
from paramcheck.domain.model.schema import Schema, SchemaRef

REF_KEY = "$ref"


@dataclass(frozen=True, slots=True)
class _Field:
    """Scalar field mapping: attribute name, wire key, type, default."""

    attr: str
    key: str
    kind: type
    default: object


_PARAMETER_FIELDS: tuple[_Field, ...] = (
    _Field("name", "name", str, ""),
    _Field("location", "in", str, ""),
    _Field("description", "description", str, ""),
    _Field("style", "style", str, ""),
    _Field("allow_empty_value", "allowEmptyValue", bool, False),
    _Field("allow_reserved", "allowReserved", bool, False),
    _Field("deprecated", "deprecated", bool, False),
    _Field("required", "required", bool, False),
)

# Wire keys with dedicated handling, in declaration order after scalars
_PARAMETER_NESTED_KEYS = ("schema", "example", "examples", "content")
_PARAMETER_KEYS = frozenset(f.key for f in _PARAMETER_FIELDS) | frozenset(_PARAMETER_NESTED_KEYS)

_MEDIA_TYPE_KEYS = frozenset({"schema", "example", "examples", "encoding"})


# =============================================================================
# Encode
# =============================================================================


def parameter_to_dict(parameter: Parameter) -> dict[str, object]:
    """Encode parameter as wire object.

    Raises:
        CodecError: extension key collides with a declared field
    """
    data: dict[str, object] = {}

    for f in _PARAMETER_FIELDS:
        value = getattr(parameter, f.attr)
        if value != f.default:
            data[f.key] = _plain(value)

    if parameter.schema is not None:
        data["schema"] = schema_ref_to_dict(parameter.schema)
    if parameter.example is not None:
        data["example"] = parameter.example
    if parameter.examples:
        data["examples"] = dict(parameter.examples)
    if parameter.content:
        data["content"] = content_to_dict(parameter.content)

    _merge_extensions(data, parameter.extensions, _PARAMETER_KEYS)
    return data


def schema_ref_to_dict(schema: SchemaRef) -> dict[str, object]:
    """Encode schema reference.

    Pointer wins over value: a SchemaRef holding both encodes as {"$ref": ...}
    and decodes back without the value.
    """
    match schema:
        case SchemaRef(ref=str() as ref) if ref:
            return {REF_KEY: ref}
        case SchemaRef(value=Schema() as value):
            return dict(value.raw)
    raise TypeError(f"expected SchemaRef, got {type(schema).__name__}")


def media_type_to_dict(media_type: MediaType) -> dict[str, object]:
    """Encode media type descriptor."""
    data: dict[str, object] = {}
    if media_type.schema is not None:
        data["schema"] = schema_ref_to_dict(media_type.schema)
    if media_type.example is not None:
        data["example"] = media_type.example
    if media_type.examples:
        data["examples"] = dict(media_type.examples)
    if media_type.encoding:
        data["encoding"] = dict(media_type.encoding)

    _merge_extensions(data, media_type.extensions, _MEDIA_TYPE_KEYS)
    return data


def content_to_dict(content: Content) -> dict[str, object]:
    """Encode content mapping, preserving media type order."""
    return {key: media_type_to_dict(value) for key, value in content.media_types.items()}


def parameter_ref_to_dict(item: ParameterRef) -> dict[str, object]:
    """Encode collection member. Members with a pointer encode as $ref."""
    match item:
        case UnresolvedParameter(ref=ref):
            return {REF_KEY: ref}
        case ResolvedParameter(ref=str() as ref) if ref:
            return {REF_KEY: ref}
        case ResolvedParameter(value=parameter):
            return parameter_to_dict(parameter)
    raise TypeError(f"expected ParameterRef, got {type(item).__name__}")


def parameters_to_list(parameters: ParameterCollection) -> list[dict[str, object]]:
    """Encode collection in member order."""
    return [parameter_ref_to_dict(item) for item in parameters]


def _plain(value: object) -> object:
    """Strip Enum wrapper so yaml.safe_dump accepts the value."""
    if isinstance(value, Enum):
        return value.value
    return value


def _merge_extensions(
    data: dict[str, object],
    extensions: Mapping[str, object],
    declared: frozenset[str],
) -> None:
    """Merge extensions after declared fields. FAIL-FIRST on collision."""
    for key, value in extensions.items():
        if key in declared:
            raise CodecError(key, "extension collides with declared field")
        data[key] = value


# =============================================================================
# Decode
# =============================================================================


def parameter_from_dict(data: object) -> Parameter:
    """Decode wire object to Parameter.

    Unknown keys are kept in `extensions`, never rejected.

    Raises:
        CodecError: not an object, reference object, or wrong field type
    """
    mapping = _require_mapping(data, "")
    if REF_KEY in mapping:
        raise CodecError(REF_KEY, "reference object is not a parameter, decode it as a collection member")

    values: dict[str, object] = {}
    for f in _PARAMETER_FIELDS:
        if f.key in mapping:
            values[f.attr] = _require_type(mapping[f.key], f.key, f.kind)

    schema = mapping.get("schema")
    content = mapping.get("content")

    return Parameter(
        **values,  # type: ignore[arg-type]
        schema=schema_ref_from_dict(schema, "schema") if schema is not None else None,
        example=mapping.get("example"),
        examples=dict(_require_mapping(mapping.get("examples", {}), "examples")),
        content=content_from_dict(content) if content is not None else None,
        extensions={k: v for k, v in mapping.items() if k not in _PARAMETER_KEYS},
    )


def schema_ref_from_dict(data: object, field: str = "schema") -> SchemaRef:
    """Decode schema object or {"$ref": ...} pointer."""
    mapping = _require_mapping(data, field)
    if REF_KEY in mapping:
        ref = _require_type(mapping[REF_KEY], f"{field}.{REF_KEY}", str)
        if not ref:
            raise CodecError(f"{field}.{REF_KEY}", "must not be empty")
        return SchemaRef(ref=ref)
    return SchemaRef(value=Schema(dict(mapping)))


def media_type_from_dict(data: object, field: str) -> MediaType:
    """Decode media type descriptor."""
    mapping = _require_mapping(data, field)
    schema = mapping.get("schema")
    return MediaType(
        schema=schema_ref_from_dict(schema, f"{field}.schema") if schema is not None else None,
        example=mapping.get("example"),
        examples=dict(_require_mapping(mapping.get("examples", {}), f"{field}.examples")),
        encoding=dict(_require_mapping(mapping.get("encoding", {}), f"{field}.encoding")),
        extensions={k: v for k, v in mapping.items() if k not in _MEDIA_TYPE_KEYS},
    )


def content_from_dict(data: object) -> Content:
    """Decode content mapping, preserving media type order."""
    mapping = _require_mapping(data, "content")
    media_types: dict[str, MediaType] = {}
    for key, value in mapping.items():
        if not isinstance(key, str) or not key:
            raise CodecError("content", f"media type must be a non-empty string, got {key!r}")
        media_types[key] = media_type_from_dict(value, f"content.{key}")
    return Content(media_types)


def parameter_ref_from_dict(data: object) -> ParameterRef:
    """Decode collection member: $ref pointer or inline parameter."""
    mapping = _require_mapping(data, "")
    if REF_KEY in mapping:
        ref = _require_type(mapping[REF_KEY], REF_KEY, str)
        if not ref:
            raise CodecError(REF_KEY, "must not be empty")
        return UnresolvedParameter(ref)
    return ResolvedParameter(parameter_from_dict(mapping))


def parameters_from_list(data: object) -> ParameterCollection:
    """Decode collection in member order."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise CodecError("", f"expected array, got {type(data).__name__}")
    return ParameterCollection([parameter_ref_from_dict(item) for item in data])


def _require_mapping(value: object, field: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise CodecError(field, f"expected object, got {type(value).__name__}")
    return value


T = TypeVar("T")


def _require_type(value: object, field: str, kind: type[T]) -> T:
    if not isinstance(value, kind):
        raise CodecError(field, f"expected {kind.__name__}, got {type(value).__name__}")
    return value


# =============================================================================
# Text
# =============================================================================


def dumps_json(subject: Parameter | ParameterCollection, *, indent: int | None = 2) -> str:
    """Serialize parameter (object) or collection (array) as JSON text."""
    return encode_json(_to_wire(subject), indent=indent)


def encode_json(data: object, *, indent: int | None = 2) -> str:
    """Serialize wire data as JSON text.

    Opaque values decoded from YAML may hold dates; they become ISO 8601 strings.

    Raises:
        CodecError: value has no JSON representation
    """
    try:
        return json.dumps(data, indent=indent, default=_json_default)
    except TypeError as e:
        raise CodecError("", f"not JSON serializable: {e}") from e


def loads_json(text: str) -> Parameter | ParameterCollection:
    """Parse JSON text: object -> Parameter, array -> ParameterCollection."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError("", f"invalid JSON: {e}") from e
    return _from_wire(data)


def dumps_yaml(subject: Parameter | ParameterCollection) -> str:
    """Serialize parameter or collection as YAML text, declared key order."""
    return yaml.safe_dump(_to_wire(subject), sort_keys=False, allow_unicode=True)


def loads_yaml(text: str) -> Parameter | ParameterCollection:
    """Parse YAML text: mapping -> Parameter, sequence -> ParameterCollection."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CodecError("", f"invalid YAML: {e}") from e
    return _from_wire(data)


def _to_wire(subject: Parameter | ParameterCollection) -> object:
    match subject:
        case Parameter():
            return parameter_to_dict(subject)
        case ParameterCollection():
            return parameters_to_list(subject)
    raise TypeError(f"expected Parameter or ParameterCollection, got {type(subject).__name__}")


def _from_wire(data: object) -> Parameter | ParameterCollection:
    if isinstance(data, Mapping):
        return parameter_from_dict(data)
    return parameters_from_list(data)


def _json_default(value: object) -> object:
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
