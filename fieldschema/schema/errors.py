"""
Schema validation error.

Usage:
    from fieldschema.schema.errors import SchemaError, SchemaErrorKind

    try:
        parse(user, data)
    except SchemaError as e:
        print(e.path, e.expected, e.received)
        if e.kind is SchemaErrorKind.MISSING_FIELD:
            ...
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from fieldschema.common.exceptions import ValidationError

__all__ = ["SchemaError", "SchemaErrorKind", "json_type_name"]


class SchemaErrorKind(str, Enum):
    """Category of a validation failure."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    CONSTRAINT_VIOLATION = "constraint_violation"
    INVALID_ENUM = "invalid_enum"


def json_type_name(value: Any) -> str:
    """Name of the JSON type ``value`` would have once serialized."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=repr)


class SchemaError(ValidationError):
    """
    Raised when data does not satisfy a schema.

    Attributes:
        kind: Failure category
        path: Dotted/bracketed path from the root (e.g. ``items[2].id``); empty for the root
        expected: Description of the violated rule
        received: The offending value, as given
    """

    def __init__(
        self,
        message: str,
        kind: SchemaErrorKind,
        path: str,
        expected: str,
        received: Any = None,
    ):
        super().__init__(message)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "expected", expected)
        object.__setattr__(self, "received", received)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: Any) -> None:
        # Traceback and note bookkeeping stay writable after raise
        if not getattr(self, "_frozen", False) or (name.startswith("__") and name.endswith("__")):
            object.__setattr__(self, name, value)
            return
        raise AttributeError(f"SchemaError is immutable; cannot set {name!r}")

    def __reduce__(self):
        return (
            type(self),
            (self.message, self.kind, self.path, self.expected, self.received),
        )

    @staticmethod
    def _where(path: str) -> str:
        return path or "<root>"

    @classmethod
    def missing_field(cls, path: str) -> SchemaError:
        """Create error for a missing required field."""
        return cls(
            f"Missing required field: {cls._where(path)}",
            SchemaErrorKind.MISSING_FIELD,
            path,
            "value",
        )

    @classmethod
    def type_mismatch(cls, path: str, expected: str, received: Any) -> SchemaError:
        """Create error for a value of the wrong type."""
        return cls(
            f"Type mismatch at {cls._where(path)}: expected {expected}, got {json_type_name(received)}",
            SchemaErrorKind.TYPE_MISMATCH,
            path,
            expected,
            received,
        )

    @classmethod
    def constraint_violation(cls, path: str, constraint: str, received: Any) -> SchemaError:
        """Create error for a value of the right type that breaks a constraint."""
        return cls(
            f"Constraint violation at {cls._where(path)}: {constraint}",
            SchemaErrorKind.CONSTRAINT_VIOLATION,
            path,
            constraint,
            received,
        )

    @classmethod
    def invalid_enum(cls, path: str, allowed: Sequence[Any], received: Any) -> SchemaError:
        """Create error for a value outside an enumerated set."""
        allowed_str = _dump(list(allowed))
        return cls(
            f"Invalid enum value at {cls._where(path)}: got {_dump(received)}, expected one of {allowed_str}",
            SchemaErrorKind.INVALID_ENUM,
            path,
            f"one of {allowed_str}",
            received,
        )
