"""
Public schema base class.

``Schema`` is the class users inherit from. It is a SchemaInstance that also
carries the descriptor factories and core functions as static attributes, so
a single import is enough to declare and use a schema:

    from fieldschema import Schema

    class User(Schema):
        name = Schema.String(min_length=1)
        age = Schema.Integer(minimum=0)

    user = Schema.create(User)
    Schema.parse(user, {"name": "Alice", "age": 30})
"""

from __future__ import annotations

from .descriptors import Array, Boolean, Enum, Integer, Literal, Null, Number, Object, String
from .extraction import clone, to_object
from .instance import SchemaInstance
from .proxy import create, get_raw_instance
from .serialization import stringify, to_json
from .validation import parse, validate

__all__ = ["Schema"]


class Schema(SchemaInstance):
    """Base class for user-declared schemas."""

    # Descriptor factories
    String = staticmethod(String)
    Number = staticmethod(Number)
    Integer = staticmethod(Integer)
    Boolean = staticmethod(Boolean)
    Null = staticmethod(Null)
    Array = staticmethod(Array)
    Object = staticmethod(Object)
    Enum = staticmethod(Enum)
    Literal = staticmethod(Literal)

    # Core functions
    create = staticmethod(create)
    parse = staticmethod(parse)
    validate = staticmethod(validate)
    to_json = staticmethod(to_json)
    stringify = staticmethod(stringify)
    to_object = staticmethod(to_object)
    clone = staticmethod(clone)
    get_raw_instance = staticmethod(get_raw_instance)
