"""
Hashable keys and equality for JSON-like values.

Lists and dicts cannot be placed in sets, and Python's ``True == 1`` would make
a boolean collide with a number. ``to_hashable`` converts a decoded JSON value
into a nested tuple that is hashable and tagged with its JSON type, so that
set-based comparisons follow JSON semantics.

Usage:
    from fieldschema.common.hashing import json_equals, to_hashable

    json_equals(True, 1)  # False

    keys = [to_hashable(item) for item in items]
    has_duplicates = len(set(keys)) != len(keys)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["json_equals", "to_hashable"]


def to_hashable(value: Any) -> tuple[Any, ...]:
    """
    Convert a JSON-like value to a hashable, type-tagged representation.

    Recursively converts nested dicts and lists to tuples. Dict keys are
    sorted so key order does not matter. Numbers compare with ``==``, so
    ``1`` and ``1.0`` map to equal keys, while ``True`` and ``1`` do not.

    Args:
        value: Value to convert

    Returns:
        Nested tuple representation that can be hashed

    Example:
        >>> to_hashable({"b": [1, True], "a": None})
        ('object', (('a', ('null',)), ('b', ('array', (('number', 1), ('boolean', True))))))
    """
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, (list, tuple)):
        return ("array", tuple(to_hashable(item) for item in value))
    if isinstance(value, Mapping):
        items = sorted((str(k), to_hashable(v)) for k, v in value.items())
        return ("object", tuple(items))
    try:
        hash(value)
    except TypeError:
        # Unhashable and not JSON-shaped: only identical objects are equal
        return ("identity", id(value))
    return ("other", value)


def json_equals(left: Any, right: Any) -> bool:
    """
    Compare two JSON-like values with strict JSON semantics.

    Booleans only equal booleans, numbers compare by IEEE-754 ``==`` (so
    ``NaN`` never equals anything and ``-0.0`` equals ``0``), and arrays and
    objects compare element by element.

    Args:
        left: First value
        right: Second value

    Returns:
        True if the values are equal
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if left is None or right is None:
        return left is right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(
            json_equals(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(
            json_equals(value, right[key]) for key, value in left.items()
        )
    return left is right
