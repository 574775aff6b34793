"""
Validation and parsing of external data against schema instances.

Both ``validate`` and ``parse`` walk the descriptor tree with the same
fail-fast algorithm: fields in declaration order, array elements left to
right, stopping at the first violation. ``parse`` validates the whole input
before assigning anything, so a failed parse leaves the instance untouched.

Python types map to JSON types as follows: string is ``str``; number is a
non-bool ``int`` or ``float`` that is not NaN; integer is a non-bool ``int``
or an integral finite ``float``; boolean is ``bool``; array is ``list`` or
``tuple``; object is any ``Mapping``. ``None`` is JSON null, and a key absent
from the mapping is a missing value.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from fieldschema.common.hashing import json_equals, to_hashable
from fieldschema.common.json_utils import load_json_document
from fieldschema.common.logging import get_logger

from .errors import SchemaError
from .field import FieldDescriptor
from .instance import SchemaInstance, iter_fields
from .proxy import Proxied, create_proxy, get_raw_instance
from .types import FieldKind, NumberOptions

logger = get_logger(__name__)

__all__ = ["parse", "parse_json", "validate", "validate_or_raise"]

S = TypeVar("S", bound=SchemaInstance)

_MISSING: Any = object()


@lru_cache(maxsize=256)
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _join(base: str, key: str) -> str:
    return f"{base}.{key}" if base else key


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _check_number(value: int | float, options: NumberOptions, path: str) -> None:
    if options.minimum is not None and value < options.minimum:
        raise SchemaError.constraint_violation(path, f"minimum {options.minimum}", value)
    if options.maximum is not None and value > options.maximum:
        raise SchemaError.constraint_violation(path, f"maximum {options.maximum}", value)
    if options.exclusive_minimum is not None and value <= options.exclusive_minimum:
        raise SchemaError.constraint_violation(
            path, f"exclusiveMinimum {options.exclusive_minimum}", value
        )
    if options.exclusive_maximum is not None and value >= options.exclusive_maximum:
        raise SchemaError.constraint_violation(
            path, f"exclusiveMaximum {options.exclusive_maximum}", value
        )
    if options.multiple_of is not None and value % options.multiple_of != 0:
        raise SchemaError.constraint_violation(path, f"multipleOf {options.multiple_of}", value)


def _validate_field(field: FieldDescriptor[Any], value: Any, path: str) -> None:
    """Check one value against one descriptor; raise SchemaError on the first violation."""
    opts = field.options

    if value is _MISSING:
        if field.is_optional or field.has_default:
            return
        raise SchemaError.missing_field(path)

    if value is None:
        if field.kind is FieldKind.NULL or field.is_optional:
            return
        raise SchemaError.type_mismatch(path, field.kind.value, None)

    kind = field.kind
    if kind is FieldKind.STRING:
        if not isinstance(value, str):
            raise SchemaError.type_mismatch(path, "string", value)
        if opts.min_length is not None and len(value) < opts.min_length:
            raise SchemaError.constraint_violation(path, f"minLength {opts.min_length}", value)
        if opts.max_length is not None and len(value) > opts.max_length:
            raise SchemaError.constraint_violation(path, f"maxLength {opts.max_length}", value)
        if opts.pattern is not None and not _compiled(opts.pattern).search(value):
            raise SchemaError.constraint_violation(path, f"pattern {opts.pattern}", value)

    elif kind is FieldKind.NUMBER:
        if not _is_number(value) or (isinstance(value, float) and math.isnan(value)):
            raise SchemaError.type_mismatch(path, "number", value)
        _check_number(value, opts, path)

    elif kind is FieldKind.INTEGER:
        if not _is_integer(value):
            raise SchemaError.type_mismatch(path, "integer", value)
        _check_number(value, opts, path)

    elif kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise SchemaError.type_mismatch(path, "boolean", value)

    elif kind is FieldKind.NULL:
        raise SchemaError.type_mismatch(path, "null", value)

    elif kind is FieldKind.ARRAY:
        if not _is_array(value):
            raise SchemaError.type_mismatch(path, "array", value)
        if opts.min_items is not None and len(value) < opts.min_items:
            raise SchemaError.constraint_violation(path, f"minItems {opts.min_items}", len(value))
        if opts.max_items is not None and len(value) > opts.max_items:
            raise SchemaError.constraint_violation(path, f"maxItems {opts.max_items}", len(value))
        if opts.unique_items and len({to_hashable(item) for item in value}) != len(value):
            raise SchemaError.constraint_violation(path, "uniqueItems", value)
        if field.items is not None:
            for index, item in enumerate(value):
                _validate_field(field.items, item, f"{path}[{index}]")

    elif kind is FieldKind.OBJECT:
        if not isinstance(value, Mapping):
            raise SchemaError.type_mismatch(path, "object", value)
        if field.schema_ref is not None:
            _validate_instance(field.schema_ref(), value, path)

    elif kind is FieldKind.ENUM:
        allowed = field.enum_values or ()
        if not any(json_equals(value, candidate) for candidate in allowed):
            raise SchemaError.invalid_enum(path, allowed, value)

    elif kind is FieldKind.LITERAL:
        if not json_equals(value, field.literal_value):
            raise SchemaError.constraint_violation(
                path, f"const {_const_repr(field.literal_value)}", value
            )


def _const_repr(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=repr)


def _validate_instance(instance: SchemaInstance, data: Mapping[str, Any], base_path: str = "") -> None:
    for key, field in iter_fields(instance):
        _validate_field(field, data.get(key, _MISSING), _join(base_path, key))


def validate_or_raise(instance: S | Proxied[S], data: Any) -> None:
    """
    Check ``data`` against a schema instance without modifying it.

    Args:
        instance: The schema instance (proxied or raw)
        data: Decoded JSON object

    Raises:
        SchemaError: On the first violation found
    """
    raw = get_raw_instance(instance)
    if not isinstance(data, Mapping):
        raise SchemaError.type_mismatch("", "object", data)
    try:
        _validate_instance(raw, data)
    except SchemaError as e:
        logger.debug(
            "schema.validation_failed",
            schema=type(raw).__name__,
            path=e.path,
            expected=e.expected,
            error_kind=e.kind.value,
        )
        raise


def validate(instance: S | Proxied[S], data: Any) -> bool:
    """
    Validate data against a schema without modifying the instance.

    Args:
        instance: The schema instance (proxied or raw)
        data: The data to validate

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_or_raise(instance, data)
    except SchemaError:
        return False
    return True


# =============================================================================
# Population
# =============================================================================


def _build_value(field: FieldDescriptor[Any], value: Any) -> Any:
    """Turn a validated input value into the value stored on a descriptor."""
    if value is None:
        return None
    if field.kind is FieldKind.OBJECT and field.schema_ref is not None:
        nested = field.schema_ref()
        _populate_instance(nested, value)
        return nested
    if field.kind is FieldKind.ARRAY:
        if field.items is None:
            return list(value)
        return [_build_value(field.items, item) for item in value]
    return value


def _populate_field(field: FieldDescriptor[Any], value: Any) -> None:
    if value is _MISSING:
        return
    if value is None and field.kind is not FieldKind.NULL:
        # Optional fields treat null like an omitted value
        return
    field.value = _build_value(field, value)


def _populate_instance(instance: SchemaInstance, data: Mapping[str, Any]) -> None:
    for key, field in iter_fields(instance):
        _populate_field(field, data.get(key, _MISSING))


def parse(instance: S | Proxied[S], data: Any) -> None:
    """
    Validate ``data`` and write it into the instance's fields.

    The whole input is validated first; on failure nothing is assigned.
    Fields omitted from ``data`` (or null on optional fields) keep their
    current value. Input containers are copied, never stored.

    Args:
        instance: The schema instance (proxied or raw)
        data: Decoded JSON object

    Raises:
        SchemaError: If validation fails
    """
    raw = get_raw_instance(instance)
    validate_or_raise(raw, data)
    _populate_instance(raw, data)
    logger.debug("schema.parsed", schema=type(raw).__name__, fields=len(data))


def parse_json(instance: S | Proxied[S], content: str) -> Proxied[S]:
    """
    Parse model-returned JSON text into a schema instance.

    Markdown code fences and surrounding prose are stripped before decoding.

    Args:
        instance: The schema instance (proxied or raw)
        content: Raw response text

    Returns:
        The populated instance, proxied

    Raises:
        ValidationError: If the text is not valid JSON
        SchemaError: If the decoded document fails validation
    """
    raw = get_raw_instance(instance)
    parse(raw, load_json_document(content))
    return create_proxy(raw)
