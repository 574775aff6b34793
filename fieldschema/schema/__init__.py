"""
Schema engine: declarative field descriptors, validation and JSON Schema output.

Supports:
- Field factories for string, number, integer, boolean, null, array, object,
  enum and literal fields
- Proxied instances with plain attribute access
- Fail-fast validation and atomic parsing with path-qualified errors
- JSON Schema (draft 2020-12) generation and strict structured-output wrappers
- Tool definitions with schema-validated arguments

Example:
    from fieldschema.schema import Schema, String, Integer, create, parse, to_json

    class User(Schema):
        name = String(min_length=1)
        age = Integer(minimum=0)

    user = create(User)
    parse(user, {"name": "Alice", "age": 30})
    print(user.name)  # Alice
    schema = to_json(user)
"""

from __future__ import annotations

from .base import Schema
from .descriptors import Array, Boolean, Enum, Integer, Literal, Null, Number, Object, String
from .errors import SchemaError, SchemaErrorKind
from .extraction import clone, to_object
from .field import FieldDescriptor, is_field_descriptor
from .instance import SchemaInstance, is_schema_class, is_schema_instance
from .proxy import Proxied, create, create_proxy, get_raw_instance, is_proxied
from .serialization import stringify, to_json
from .strict import make_strict, needs_strict_transform, to_response_format
from .tool import Tool, ToolCall, ToolResult
from .types import FieldKind
from .validation import parse, parse_json, validate, validate_or_raise

__all__ = [
    # Schema classes
    "Schema",
    "SchemaInstance",
    # Factories
    "String",
    "Number",
    "Integer",
    "Boolean",
    "Null",
    "Array",
    "Object",
    "Enum",
    "Literal",
    # Descriptors
    "FieldDescriptor",
    "FieldKind",
    "is_field_descriptor",
    "is_schema_instance",
    "is_schema_class",
    # Proxy layer
    "Proxied",
    "create",
    "create_proxy",
    "get_raw_instance",
    "is_proxied",
    # Validation
    "parse",
    "parse_json",
    "validate",
    "validate_or_raise",
    "SchemaError",
    "SchemaErrorKind",
    # Output
    "to_json",
    "stringify",
    "to_object",
    "clone",
    # Structured output
    "make_strict",
    "needs_strict_transform",
    "to_response_format",
    # Tools
    "Tool",
    "ToolCall",
    "ToolResult",
]
