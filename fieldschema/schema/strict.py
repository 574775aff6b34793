"""
Strict structured-output helpers for generated JSON Schemas.

OpenAI-style strict mode requires every object to forbid additional
properties and to list all of its properties as required. Optional
properties are kept expressible by making them nullable:

    {"anyOf": [<original fragment>, {"type": "null"}]}

Usage:
    from fieldschema.schema.strict import make_strict, to_response_format

    response_format = to_response_format(user, "user_extraction")
"""

from __future__ import annotations

from typing import Any, TypeVar

from fieldschema.common.config import load_settings

from .instance import SchemaInstance
from .proxy import Proxied, get_raw_instance
from .serialization import instance_to_schema

__all__ = ["make_strict", "needs_strict_transform", "to_response_format"]

S = TypeVar("S", bound=SchemaInstance)


def make_strict(schema: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a JSON Schema fragment to strict-mode form.

    The input is not modified; a transformed copy is returned.

    Args:
        schema: JSON Schema fragment or document

    Returns:
        Fragment where every object has ``additionalProperties: false``, every
        property is required, and formerly optional properties accept null
    """
    result = dict(schema)

    if result.get("type") == "object":
        result["additionalProperties"] = False
        properties = result.get("properties")
        if isinstance(properties, dict):
            required = set(result.get("required") or [])
            strict_properties: dict[str, Any] = {}
            for name, fragment in properties.items():
                transformed = make_strict(fragment)
                if name in required:
                    strict_properties[name] = transformed
                else:
                    strict_properties[name] = {"anyOf": [transformed, {"type": "null"}]}
            result["properties"] = strict_properties
            result["required"] = list(properties)

    if result.get("type") == "array" and isinstance(result.get("items"), dict):
        result["items"] = make_strict(result["items"])

    if isinstance(result.get("anyOf"), list):
        result["anyOf"] = [make_strict(option) for option in result["anyOf"]]

    return result


def needs_strict_transform(schema: dict[str, Any]) -> bool:
    """
    Check whether a schema is not yet in strict-mode form.

    Args:
        schema: JSON Schema fragment or document

    Returns:
        True if any object allows additional properties or leaves a property
        out of ``required``
    """
    if schema.get("type") == "object":
        if schema.get("additionalProperties") is not False:
            return True
        properties = schema.get("properties")
        if isinstance(properties, dict):
            required = schema.get("required") or []
            if set(properties) != set(required) or len(required) != len(properties):
                return True
            if any(needs_strict_transform(fragment) for fragment in properties.values()):
                return True

    if isinstance(schema.get("anyOf"), list):
        if any(needs_strict_transform(option) for option in schema["anyOf"]):
            return True

    if schema.get("type") == "array" and isinstance(schema.get("items"), dict):
        return needs_strict_transform(schema["items"])

    return False


def to_response_format(
    instance: S | Proxied[S],
    name: str,
    *,
    strict: bool | None = None,
) -> dict[str, Any]:
    """
    Build a structured-output definition for a schema instance.

    Args:
        instance: The schema instance (proxied or raw)
        name: Schema name (e.g., 'user_extraction')
        strict: Apply strict-mode rules (default: from settings)

    Returns:
        ``{"name": ..., "strict": ..., "schema": ...}`` ready for an LLM request

    Example:
        >>> to_response_format(create(Summary), "summary_output")
        {'name': 'summary_output', 'strict': True, 'schema': {'type': 'object', ...}}
    """
    if strict is None:
        strict = load_settings().strict_output

    schema = instance_to_schema(get_raw_instance(instance))
    return {
        "name": name,
        "strict": strict,
        "schema": make_strict(schema) if strict else schema,
    }
