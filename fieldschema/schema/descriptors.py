"""
Field descriptor factories, one per JSON Schema kind.

Each factory is a pure function returning a FieldDescriptor. Use them as class
attributes of a schema class:

    class Post(Schema):
        title = String(min_length=1, description="Headline")
        rating = Number(minimum=0, maximum=5)
        views = Integer(minimum=0, default=0)
        published = Boolean(default=False)
        tags = Array(String(), min_items=1, unique_items=True)
        author = Object(Author)
        status = Enum(["draft", "live"])
        version = Literal(2)

Malformed declarations raise SchemaDefinitionError when the class body runs.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fieldschema.common.exceptions import SchemaDefinitionError
from fieldschema.common.hashing import json_equals
from fieldschema.common.logging import get_logger

from .field import FieldDescriptor, is_field_descriptor
from .instance import SchemaInstance, is_schema_class
from .types import (
    ArrayOptions,
    BaseFieldOptions,
    BooleanOptions,
    EnumOptions,
    FieldKind,
    IntegerOptions,
    NumberOptions,
    ObjectOptions,
    StringFormat,
    StringOptions,
)

logger = get_logger(__name__)

__all__ = [
    "String",
    "Number",
    "Integer",
    "Boolean",
    "Null",
    "Array",
    "Object",
    "Enum",
    "Literal",
]

O = TypeVar("O", bound=BaseModel)
S = TypeVar("S", bound=SchemaInstance)


def _build_options(model: type[O], kind: FieldKind, **values: Any) -> O:
    """Validate factory arguments into the kind's frozen options model."""
    try:
        return model(**values)
    except PydanticValidationError as e:
        raise SchemaDefinitionError(
            f"Invalid options for {kind.value} field",
            context={"errors": e.errors(include_url=False)},
        ) from e


def String(
    *,
    description: str | None = None,
    optional: bool = False,
    default: str | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
    format: StringFormat | None = None,
) -> FieldDescriptor[str]:
    """
    Create a string field.

    Args:
        description: Human-readable description
        optional: Whether the field may be omitted or null
        default: Default value (otherwise ``""``)
        min_length: Minimum length in characters
        max_length: Maximum length in characters
        pattern: Regular expression the value must contain a match for
        format: Semantic format hint, emitted but not enforced

    Returns:
        Field descriptor for string values
    """
    options = _build_options(
        StringOptions,
        FieldKind.STRING,
        description=description,
        optional=optional,
        default=default,
        min_length=min_length,
        max_length=max_length,
        pattern=pattern,
        format=format,
    )
    return FieldDescriptor(FieldKind.STRING, "" if default is None else default, options)


def _numeric(
    kind: FieldKind,
    model: type[NumberOptions],
    **values: Any,
) -> FieldDescriptor[Any]:
    options = _build_options(model, kind, **values)
    default = 0 if options.default is None else options.default
    return FieldDescriptor(kind, default, options)


def Number(
    *,
    description: str | None = None,
    optional: bool = False,
    default: float | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: float | None = None,
    exclusive_maximum: float | None = None,
    multiple_of: float | None = None,
) -> FieldDescriptor[float]:
    """Create a number field (floating point). Defaults to ``0``."""
    return _numeric(
        FieldKind.NUMBER,
        NumberOptions,
        description=description,
        optional=optional,
        default=default,
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        multiple_of=multiple_of,
    )


def Integer(
    *,
    description: str | None = None,
    optional: bool = False,
    default: int | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: float | None = None,
    exclusive_maximum: float | None = None,
    multiple_of: float | None = None,
) -> FieldDescriptor[int]:
    """Create an integer field (whole numbers only). Defaults to ``0``."""
    return _numeric(
        FieldKind.INTEGER,
        IntegerOptions,
        description=description,
        optional=optional,
        default=default,
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        multiple_of=multiple_of,
    )


def Boolean(
    *,
    description: str | None = None,
    optional: bool = False,
    default: bool | None = None,
) -> FieldDescriptor[bool]:
    """Create a boolean field. Defaults to ``False``."""
    options = _build_options(
        BooleanOptions,
        FieldKind.BOOLEAN,
        description=description,
        optional=optional,
        default=default,
    )
    return FieldDescriptor(FieldKind.BOOLEAN, bool(default), options)


def Null(*, description: str | None = None, optional: bool = False) -> FieldDescriptor[None]:
    """Create a field whose only valid value is null."""
    options = _build_options(
        BaseFieldOptions, FieldKind.NULL, description=description, optional=optional
    )
    return FieldDescriptor(FieldKind.NULL, None, options)


def Array(
    items: FieldDescriptor[Any],
    *,
    description: str | None = None,
    optional: bool = False,
    min_items: int | None = None,
    max_items: int | None = None,
    unique_items: bool | None = None,
) -> FieldDescriptor[list[Any]]:
    """
    Create an array field.

    The item descriptor is kept by reference and describes the shape and
    constraints of every element.

    Args:
        items: Field descriptor for array elements
        description: Human-readable description
        optional: Whether the field may be omitted or null
        min_items: Minimum number of elements
        max_items: Maximum number of elements
        unique_items: Whether all elements must be distinct

    Returns:
        Field descriptor for list values, defaulting to ``[]``
    """
    if not is_field_descriptor(items):
        raise SchemaDefinitionError(
            "Array items must be a field descriptor",
            context={"type": type(items).__name__},
        )
    options = _build_options(
        ArrayOptions,
        FieldKind.ARRAY,
        description=description,
        optional=optional,
        min_items=min_items,
        max_items=max_items,
        unique_items=unique_items,
    )
    return FieldDescriptor(FieldKind.ARRAY, (), options, items=items)


def Object(
    schema: type[S],
    *,
    description: str | None = None,
    optional: bool = False,
) -> FieldDescriptor[S]:
    """
    Create a nested object field from another schema class.

    The default value is a new instance of ``schema``, and every instance of
    the containing class gets its own nested instance.

    Args:
        schema: The nested schema class
        description: Human-readable description
        optional: Whether the field may be omitted or null

    Returns:
        Field descriptor holding a nested schema instance
    """
    if not is_schema_class(schema):
        raise SchemaDefinitionError(
            "Object fields need a schema class",
            context={"schema": getattr(schema, "__name__", repr(schema))},
        )
    options = _build_options(
        ObjectOptions, FieldKind.OBJECT, description=description, optional=optional
    )
    return FieldDescriptor(FieldKind.OBJECT, None, options, schema_ref=schema)


def Enum(
    values: Iterable[Any],
    *,
    description: str | None = None,
    optional: bool = False,
    default: Any = None,
) -> FieldDescriptor[Any]:
    """
    Create an enum field restricted to ``values``.

    The value defaults to ``default`` when it is one of ``values``; otherwise
    to the first value. A default outside ``values`` is ignored.

    Raises:
        SchemaDefinitionError: If ``values`` is empty
    """
    enum_values = tuple(copy.deepcopy(list(values)))
    if not enum_values:
        raise SchemaDefinitionError("Enum fields need at least one value")

    if default is not None and not any(json_equals(default, v) for v in enum_values):
        logger.warning(
            "schema.enum_default_ignored",
            default=default,
            allowed=list(enum_values),
        )
        default = None
    default = copy.deepcopy(default)

    options = _build_options(
        EnumOptions,
        FieldKind.ENUM,
        description=description,
        optional=optional,
        default=default,
    )
    initial = enum_values[0] if default is None else default
    return FieldDescriptor(FieldKind.ENUM, initial, options, enum_values=enum_values)


def Literal(
    value: Any,
    *,
    description: str | None = None,
    optional: bool = False,
) -> FieldDescriptor[Any]:
    """
    Create a field pinned to exactly ``value`` (JSON Schema ``const``).

    ``value`` is copied at declaration, so later changes to the passed object
    do not move the const.

    Null is checked before the const: ``Literal(None)`` rejects ``None`` unless
    the field is optional. Use ``Null()`` for a field that must be null.
    """
    options = _build_options(
        BaseFieldOptions, FieldKind.LITERAL, description=description, optional=optional
    )
    pinned = copy.deepcopy(value)
    return FieldDescriptor(FieldKind.LITERAL, pinned, options, literal_value=pinned)
