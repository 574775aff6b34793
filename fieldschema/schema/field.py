"""
Field descriptor: the record describing one declared schema field.

A descriptor carries the field's kind, its current mutable ``value``, the
default captured when it was declared, and the immutable constraint options.
Composite kinds also carry shape metadata: the item descriptor (array), the
nested schema class (object), the allowed values (enum) or the pinned value
(literal).
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .types import BaseFieldOptions, FieldKind

if TYPE_CHECKING:
    from .instance import SchemaInstance

__all__ = ["FieldDescriptor", "is_field_descriptor"]

T = TypeVar("T")

_UNSET: Any = object()


class FieldDescriptor(Generic[T]):
    """
    Descriptor for a single schema field.

    Only ``value`` is writable. ``default_value`` always hands out a fresh
    container for array and object kinds, so the captured default cannot be
    changed through a returned reference.

    Attributes:
        kind: Field kind
        value: Current value; a nested SchemaInstance for object fields
        options: Frozen constraint options for the kind
        items: Item descriptor (array fields only)
        schema_ref: Nested schema class (object fields only)
        enum_values: Allowed values in declaration order (enum fields only)
        literal_value: The pinned value (literal fields only)
    """

    __slots__ = (
        "value",
        "_kind",
        "_default",
        "_options",
        "_items",
        "_schema_ref",
        "_enum_values",
        "_literal_value",
    )

    def __init__(
        self,
        kind: FieldKind,
        default: T,
        options: BaseFieldOptions,
        *,
        items: FieldDescriptor[Any] | None = None,
        schema_ref: type[SchemaInstance] | None = None,
        enum_values: tuple[Any, ...] | None = None,
        literal_value: Any = None,
        value: Any = _UNSET,
    ):
        self._kind = kind
        self._default = default
        self._options = options
        self._items = items
        self._schema_ref = schema_ref
        self._enum_values = enum_values
        self._literal_value = literal_value
        self.value: Any = self.default_value if value is _UNSET else value

    @property
    def kind(self) -> FieldKind:
        return self._kind

    @property
    def options(self) -> BaseFieldOptions:
        return self._options

    @property
    def items(self) -> FieldDescriptor[Any] | None:
        return self._items

    @property
    def schema_ref(self) -> type[SchemaInstance] | None:
        return self._schema_ref

    @property
    def enum_values(self) -> tuple[Any, ...] | None:
        return self._enum_values

    @property
    def literal_value(self) -> Any:
        return self._literal_value

    @property
    def default_value(self) -> T:
        """The declared default; container values always come back as new copies."""
        if self._kind is FieldKind.OBJECT and self._schema_ref is not None:
            return self._schema_ref()  # type: ignore[return-value]
        if self._kind is FieldKind.ARRAY:
            return [copy.deepcopy(item) for item in self._default]  # type: ignore[return-value,attr-defined]
        if isinstance(self._default, (list, dict)):
            return copy.deepcopy(self._default)
        return self._default

    @property
    def is_optional(self) -> bool:
        return bool(self._options.optional)

    @property
    def has_default(self) -> bool:
        return self._options.default_option is not None

    def instantiate(self) -> FieldDescriptor[T]:
        """
        Create the per-instance copy of a declared descriptor.

        The copy starts from a fresh default value and shares the immutable
        shape metadata (options, items, schema_ref, enum_values, literal_value).
        """
        return FieldDescriptor(
            self._kind,
            self._default,
            self._options,
            items=self._items,
            schema_ref=self._schema_ref,
            enum_values=self._enum_values,
            literal_value=self._literal_value,
        )

    def copy_with_value(self, value: Any) -> FieldDescriptor[T]:
        """Create a descriptor with the same shape holding ``value``."""
        return FieldDescriptor(
            self._kind,
            self._default,
            self._options,
            items=self._items,
            schema_ref=self._schema_ref,
            enum_values=self._enum_values,
            literal_value=self._literal_value,
            value=value,
        )

    def __repr__(self) -> str:
        return f"FieldDescriptor(kind={self._kind.value!r}, value={self.value!r})"


def is_field_descriptor(value: Any) -> bool:
    """Check whether ``value`` is a FieldDescriptor."""
    return isinstance(value, FieldDescriptor)
