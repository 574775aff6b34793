"""
JSON Schema (draft 2020-12) generation from schema instances.

Usage:
    document = to_json(user)     # dict, ready for a tool/structured-output request
    text = stringify(user)       # the same document as indented JSON text

Field fragments by kind:
    string          {"type": "string", minLength?, maxLength?, pattern?, format?}
    number/integer  {"type": ..., minimum?, maximum?, exclusiveMinimum?, exclusiveMaximum?, multipleOf?}
    boolean/null    {"type": ...}
    array           {"type": "array", "items": <fragment>, minItems?, maxItems?, uniqueItems?}
    object          {"type": "object", "properties": {...}, "required": [...]}
    enum            {"enum": [...]}
    literal         {"const": <value>}

Every fragment also carries ``description`` and ``default`` when declared. A
property is listed in ``required`` unless it is declared optional; a default
alone does not make it optional in the generated schema.
"""

from __future__ import annotations

import copy
import json
from typing import Any, TypeVar

from fieldschema.common.config import load_settings

from .field import FieldDescriptor
from .instance import SchemaInstance, iter_fields
from .proxy import Proxied, get_raw_instance
from .types import JSON_SCHEMA_DIALECT, FieldKind

__all__ = ["field_to_schema", "instance_to_schema", "stringify", "to_json"]

S = TypeVar("S", bound=SchemaInstance)

_TYPED_KINDS = {
    FieldKind.STRING,
    FieldKind.NUMBER,
    FieldKind.INTEGER,
    FieldKind.BOOLEAN,
    FieldKind.NULL,
}


def field_to_schema(field: FieldDescriptor[Any]) -> dict[str, Any]:
    """Build the JSON Schema fragment for one field descriptor."""
    kind = field.kind
    fragment: dict[str, Any]

    if kind in _TYPED_KINDS:
        fragment = {"type": kind.value, **field.options.json_constraints()}
    elif kind is FieldKind.ARRAY:
        fragment = {"type": "array"}
        if field.items is not None:
            fragment["items"] = field_to_schema(field.items)
        fragment.update(field.options.json_constraints())
    elif kind is FieldKind.OBJECT:
        fragment = instance_to_schema(field.schema_ref()) if field.schema_ref else {"type": "object"}
    elif kind is FieldKind.ENUM:
        fragment = {"enum": copy.deepcopy(list(field.enum_values or ()))}
    else:
        fragment = {"const": copy.deepcopy(field.literal_value)}

    if field.options.description:
        fragment["description"] = field.options.description
    if field.has_default:
        fragment["default"] = copy.deepcopy(field.options.default_option)
    return fragment


def instance_to_schema(instance: SchemaInstance) -> dict[str, Any]:
    """Build the object schema for a raw instance: properties and required list."""
    properties: dict[str, Any] = {}
    required: list[str] = []
    for name, field in iter_fields(instance):
        properties[name] = field_to_schema(field)
        if not field.is_optional:
            required.append(name)
    return {"type": "object", "properties": properties, "required": required}


def to_json(instance: S | Proxied[S]) -> dict[str, Any]:
    """
    Generate a JSON Schema document from a schema instance.

    Args:
        instance: The schema instance (proxied or raw)

    Returns:
        JSON Schema object conforming to draft 2020-12
    """
    raw = get_raw_instance(instance)
    return {"$schema": JSON_SCHEMA_DIALECT, **instance_to_schema(raw)}


def stringify(instance: S | Proxied[S], pretty: bool = True) -> str:
    """
    Generate a JSON Schema string from a schema instance.

    Args:
        instance: The schema instance (proxied or raw)
        pretty: Whether to indent the output (default: True)

    Returns:
        JSON Schema as a string
    """
    document = to_json(instance)
    if pretty:
        return json.dumps(document, indent=load_settings().pretty_indent, ensure_ascii=False)
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)
