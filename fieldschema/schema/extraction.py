"""
Plain-value extraction and deep cloning of schema instances.

``to_object`` snapshots the field values as plain dicts and lists, and
``clone`` copies the whole descriptor tree into a new instance. Neither result
shares a mutable container with the source, so changing one never affects the
other.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from .instance import SchemaInstance, is_schema_instance, iter_fields
from .proxy import Proxied, create_proxy, get_raw_instance, is_proxied

__all__ = ["clone", "to_object"]

S = TypeVar("S", bound=SchemaInstance)


def _extract_value(value: Any) -> Any:
    if is_proxied(value):
        value = get_raw_instance(value)
    if is_schema_instance(value):
        return _extract_instance(value)
    if isinstance(value, (list, tuple)):
        return [_extract_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _extract_value(item) for key, item in value.items()}
    return value


def _extract_instance(instance: SchemaInstance) -> dict[str, Any]:
    return {name: _extract_value(field.value) for name, field in iter_fields(instance)}


def to_object(instance: S | Proxied[S]) -> dict[str, Any]:
    """
    Extract a plain dict of field values from a schema instance.

    Nested schema instances become dicts, and every list and dict in the
    result is a new container.

    Args:
        instance: The schema instance (proxied or raw)

    Returns:
        Plain dict with field values
    """
    return _extract_instance(get_raw_instance(instance))


def _clone_value(value: Any) -> Any:
    if is_proxied(value):
        return create_proxy(_clone_instance(get_raw_instance(value)))
    if is_schema_instance(value):
        return _clone_instance(value)
    if isinstance(value, list):
        return [_clone_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_clone_value(item) for item in value)
    if isinstance(value, Mapping):
        return {key: _clone_value(item) for key, item in value.items()}
    return value


def _clone_instance(instance: S) -> S:
    cloned = type(instance)()
    for name, field in iter_fields(instance):
        vars(cloned)[name] = field.copy_with_value(_clone_value(field.value))
    return cloned


def clone(instance: S | Proxied[S]) -> Proxied[S]:
    """
    Create a deep copy of a schema instance.

    Every descriptor is copied with a deep-copied value; options and shape
    metadata are immutable and shared.

    Args:
        instance: The schema instance (proxied or raw)

    Returns:
        A new proxied instance with cloned values
    """
    return create_proxy(_clone_instance(get_raw_instance(instance)))
