"""
fieldschema - declarative schemas for LLM tool calls and structured output.

Declare a schema once as a class, then use it to generate a JSON Schema for a
model request and to validate and parse what the model sends back.

Example:
    from fieldschema import Schema, create, parse, to_json

    class Address(Schema):
        street = Schema.String()
        city = Schema.String()

    class User(Schema):
        name = Schema.String(min_length=1)
        address = Schema.Object(Address)

    user = create(User)
    parse(user, {"name": "Alice", "address": {"street": "123 Main", "city": "Boston"}})
    print(user.address.city)  # Boston
"""

from __future__ import annotations

from .common import (
    BaseError,
    ConfigurationError,
    SchemaDefinitionError,
    Settings,
    ValidationError,
    configure_logging,
    load_settings,
)
from .schema import (
    Array,
    Boolean,
    Enum,
    FieldDescriptor,
    FieldKind,
    Integer,
    Literal,
    Null,
    Number,
    Object,
    Proxied,
    Schema,
    SchemaError,
    SchemaErrorKind,
    SchemaInstance,
    String,
    Tool,
    ToolCall,
    ToolResult,
    clone,
    create,
    create_proxy,
    get_raw_instance,
    is_field_descriptor,
    is_proxied,
    is_schema_instance,
    make_strict,
    parse,
    parse_json,
    stringify,
    to_json,
    to_object,
    to_response_format,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Schema classes and factories
    "Schema",
    "SchemaInstance",
    "String",
    "Number",
    "Integer",
    "Boolean",
    "Null",
    "Array",
    "Object",
    "Enum",
    "Literal",
    "FieldDescriptor",
    "FieldKind",
    # Core functions
    "create",
    "parse",
    "parse_json",
    "validate",
    "to_json",
    "stringify",
    "to_object",
    "clone",
    "to_response_format",
    "make_strict",
    # Proxy layer
    "Proxied",
    "create_proxy",
    "get_raw_instance",
    "is_proxied",
    "is_field_descriptor",
    "is_schema_instance",
    # Tools
    "Tool",
    "ToolCall",
    "ToolResult",
    # Errors
    "BaseError",
    "ConfigurationError",
    "SchemaDefinitionError",
    "ValidationError",
    "SchemaError",
    "SchemaErrorKind",
    # Config
    "Settings",
    "load_settings",
    "configure_logging",
]
