"""
Schema instances: classes whose fields are declared with descriptor factories.

Fields are declared as class attributes. When the class body is evaluated,
``__init_subclass__`` records every FieldDescriptor attribute (inherited
fields first, in declaration order) in an ordered field table. Constructing an
instance installs a fresh per-instance copy of each declared descriptor as an
own attribute, so no value is ever shared between two instances.

Example:
    class Address(SchemaInstance):
        street = String()
        city = String()

    raw = Address()
    raw.city.value = "Boston"   # raw access goes through the descriptor
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, ClassVar

from .field import FieldDescriptor, is_field_descriptor

__all__ = ["SchemaInstance", "is_schema_instance", "is_schema_class", "iter_fields"]


class SchemaInstance:
    """
    Marker base for schema classes.

    Every own attribute set up by ``__init__`` is a FieldDescriptor.
    """

    __schema_fields__: ClassVar[dict[str, FieldDescriptor[Any]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields: dict[str, FieldDescriptor[Any]] = {}
        for base in reversed(cls.__mro__[1:]):
            fields.update(base.__dict__.get("__schema_fields__", {}))
        for name, value in cls.__dict__.items():
            if is_field_descriptor(value):
                fields[name] = value
        cls.__schema_fields__ = fields

    def __init__(self) -> None:
        for name, declared in type(self).__schema_fields__.items():
            self.__dict__[name] = declared.instantiate()

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={field.value!r}" for name, field in iter_fields(self))
        return f"{type(self).__name__}({body})"


def is_schema_instance(value: Any) -> bool:
    """Check whether ``value`` is a raw (unproxied) schema instance."""
    return isinstance(value, SchemaInstance)


def is_schema_class(value: Any) -> bool:
    """Check whether ``value`` is a schema class."""
    return isinstance(value, type) and issubclass(value, SchemaInstance)


def iter_fields(instance: SchemaInstance) -> Iterator[tuple[str, FieldDescriptor[Any]]]:
    """Yield ``(name, descriptor)`` for every field of a raw instance, in declaration order."""
    for name, value in vars(instance).items():
        if is_field_descriptor(value):
            yield name, value
