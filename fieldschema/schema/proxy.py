"""
Proxy layer for clean property access on schema instances.

A Proxied instance wraps exactly one raw SchemaInstance. Reading a field
returns ``descriptor.value`` (nested schema instances come back proxied too),
and assigning a field writes into ``descriptor.value`` without replacing the
descriptor. Assigned values are stored verbatim; they are checked only by
``parse``/``validate``.

Usage:
    user = create_proxy(User())
    user.name = "Alice"             # writes User().name.value
    user.address.city = "Boston"    # nested instances are proxied on read
    raw = get_raw_instance(user)    # descriptors, defaults and options
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from fieldschema.common.exceptions import ConfigurationError

from .field import FieldDescriptor, is_field_descriptor
from .instance import SchemaInstance, is_schema_class, is_schema_instance, iter_fields

__all__ = ["Proxied", "create", "create_proxy", "get_raw_instance", "is_proxied"]

S = TypeVar("S", bound=SchemaInstance)


def _field(raw: SchemaInstance, name: str) -> FieldDescriptor[Any] | None:
    value = vars(raw).get(name)
    return value if is_field_descriptor(value) else None


class Proxied(Generic[S]):
    """Attribute-access wrapper around a raw schema instance."""

    __slots__ = ("_raw",)

    def __init__(self, raw: S):
        object.__setattr__(self, "_raw", raw)

    def __getattr__(self, name: str) -> Any:
        raw = object.__getattribute__(self, "_raw")
        field = _field(raw, name)
        if field is None:
            return getattr(raw, name)
        value = field.value
        if is_schema_instance(value):
            return Proxied(value)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        raw = object.__getattribute__(self, "_raw")
        field = _field(raw, name)
        if field is None:
            setattr(raw, name, value)
        else:
            field.value = value

    def __delattr__(self, name: str) -> None:
        raw = object.__getattribute__(self, "_raw")
        if _field(raw, name) is not None:
            raise AttributeError(f"Cannot delete schema field {name!r}")
        delattr(raw, name)

    def __iter__(self) -> Iterator[str]:
        raw = object.__getattribute__(self, "_raw")
        for name, _ in iter_fields(raw):
            yield name

    def __contains__(self, name: object) -> bool:
        raw = object.__getattribute__(self, "_raw")
        return isinstance(name, str) and _field(raw, name) is not None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self))

    def __reduce__(self):
        # Rebuild through __init__; copy.deepcopy then deep-copies the raw instance
        return (type(self), (object.__getattribute__(self, "_raw"),))

    def __repr__(self) -> str:
        return f"Proxied({object.__getattribute__(self, '_raw')!r})"


def is_proxied(value: Any) -> bool:
    """Check whether ``value`` is a proxied schema instance."""
    return isinstance(value, Proxied)


def create_proxy(instance: S) -> Proxied[S]:
    """
    Wrap a raw schema instance for direct property access.

    Args:
        instance: The raw schema instance to wrap

    Returns:
        Proxied instance

    Raises:
        ConfigurationError: If ``instance`` is not a schema instance
    """
    if not is_schema_instance(instance):
        raise ConfigurationError(
            "Only schema instances can be proxied",
            context={"type": type(instance).__name__},
        )
    return Proxied(instance)


def get_raw_instance(instance: S | Proxied[S]) -> S:
    """
    Return the backing raw instance.

    Raw instances are returned unchanged, so every core function can accept
    either form and normalize with one call.

    Raises:
        ConfigurationError: If ``instance`` is neither a raw nor a proxied instance
    """
    if isinstance(instance, Proxied):
        return object.__getattribute__(instance, "_raw")
    if is_schema_instance(instance):
        return instance
    raise ConfigurationError(
        "Expected a schema instance or proxied schema instance",
        context={"type": type(instance).__name__},
    )


def create(schema_class: type[S]) -> Proxied[S]:
    """
    Instantiate a schema class and wrap it for direct property access.

    Args:
        schema_class: The schema class to instantiate

    Returns:
        A proxied instance whose fields hold their default values

    Raises:
        ConfigurationError: If ``schema_class`` is not a schema class
    """
    if not is_schema_class(schema_class):
        raise ConfigurationError(
            "create() needs a schema class",
            context={"schema": getattr(schema_class, "__name__", repr(schema_class))},
        )
    return Proxied(schema_class())
