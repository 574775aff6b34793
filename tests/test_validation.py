from __future__ import annotations

import pickle

import pytest

from fieldschema import Schema, SchemaError, SchemaErrorKind, ValidationError
from fieldschema.schema import create, validate, validate_or_raise


def _error(instance, data) -> SchemaError:
    with pytest.raises(SchemaError) as exc_info:
        validate_or_raise(instance, data)
    return exc_info.value


def test_valid_data_passes(user_schema, valid_user_data) -> None:
    assert validate(create(user_schema), valid_user_data) is True


def test_validate_does_not_modify_instance(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    validate(user, valid_user_data)

    assert user.name == ""
    assert user.address.city == ""


def test_empty_string_breaks_min_length() -> None:
    class Named(Schema):
        name = Schema.String(min_length=1)

    error = _error(create(Named), {"name": ""})

    assert error.kind is SchemaErrorKind.CONSTRAINT_VIOLATION
    assert error.path == "name"
    assert error.expected == "minLength 1"
    assert str(error) == "Constraint violation at name: minLength 1"


def test_fractional_value_is_not_an_integer() -> None:
    class Person(Schema):
        age = Schema.Integer()

    error = _error(create(Person), {"age": 25.5})

    assert error.kind is SchemaErrorKind.TYPE_MISMATCH
    assert error.path == "age"
    assert error.expected == "integer"
    assert error.received == 25.5
    assert error.message == "Type mismatch at age: expected integer, got number"


def test_integral_float_is_an_integer() -> None:
    class Person(Schema):
        age = Schema.Integer()

    assert validate(create(Person), {"age": 3.0})


def test_booleans_are_not_numbers() -> None:
    class Counter(Schema):
        count = Schema.Integer()
        ratio = Schema.Number(optional=True)

    assert not validate(create(Counter), {"count": True})
    assert not validate(create(Counter), {"count": 1, "ratio": False})


def test_nan_is_not_a_number() -> None:
    class Reading(Schema):
        value = Schema.Number()

    assert _error(create(Reading), {"value": float("nan")}).kind is SchemaErrorKind.TYPE_MISMATCH


def test_min_items() -> None:
    class Tagged(Schema):
        tags = Schema.Array(Schema.String(), min_items=1)

    error = _error(create(Tagged), {"tags": []})

    assert error.kind is SchemaErrorKind.CONSTRAINT_VIOLATION
    assert error.expected == "minItems 1"
    assert error.received == 0
    assert validate(create(Tagged), {"tags": ["a"]})


def test_unique_items() -> None:
    class Tagged(Schema):
        tags = Schema.Array(Schema.Integer(), unique_items=True)

    assert not validate(create(Tagged), {"tags": [1, 2, 1]})
    assert not validate(create(Tagged), {"tags": [1, 1.0]})
    assert validate(create(Tagged), {"tags": [1, 2, 3]})


def test_invalid_enum_lists_allowed_values() -> None:
    class Account(Schema):
        role = Schema.Enum(["admin", "user", "guest"])

    error = _error(create(Account), {"role": "superadmin"})

    assert error.kind is SchemaErrorKind.INVALID_ENUM
    assert error.path == "role"
    assert error.received == "superadmin"
    for value in ("admin", "user", "guest"):
        assert value in error.message
    assert error.message == (
        'Invalid enum value at role: got "superadmin", expected one of ["admin","user","guest"]'
    )


def test_enum_does_not_confuse_booleans_and_numbers() -> None:
    class Flag(Schema):
        level = Schema.Enum([1, 2])

    assert validate(create(Flag), {"level": 1})
    assert not validate(create(Flag), {"level": True})


def test_missing_required_field(user_schema, valid_user_data) -> None:
    del valid_user_data["age"]

    error = _error(create(user_schema), valid_user_data)

    assert error.kind is SchemaErrorKind.MISSING_FIELD
    assert error.path == "age"
    assert error.message == "Missing required field: age"


def test_optional_and_defaulted_fields_may_be_omitted(order_schema) -> None:
    assert validate(create(order_schema), {"kind": "order", "items": []})


def test_null_only_allowed_for_optional_or_null_fields(user_schema, valid_user_data) -> None:
    assert validate(create(user_schema), {**valid_user_data, "email": None})

    error = _error(create(user_schema), {**valid_user_data, "name": None})
    assert error.kind is SchemaErrorKind.TYPE_MISMATCH
    assert error.message == "Type mismatch at name: expected string, got null"


def test_null_field() -> None:
    class Empty(Schema):
        nothing = Schema.Null()

    assert validate(create(Empty), {"nothing": None})
    assert not validate(create(Empty), {"nothing": 0})


def test_nested_paths(user_schema, valid_user_data) -> None:
    data = {**valid_user_data, "address": {"street": 12, "city": "Boston"}}

    error = _error(create(user_schema), data)

    assert error.path == "address.street"
    assert error.kind is SchemaErrorKind.TYPE_MISMATCH


def test_array_element_paths(order_schema, valid_order_data) -> None:
    valid_order_data["items"][1]["quantity"] = 0

    error = _error(create(order_schema), valid_order_data)

    assert error.path == "items[1].quantity"
    assert error.expected == "minimum 1"


def test_fail_fast_reports_first_field_in_declaration_order(user_schema) -> None:
    error = _error(create(user_schema), {"age": -1, "tags": []})

    assert error.path == "name"


def test_pattern_uses_search(order_schema, valid_order_data) -> None:
    valid_order_data["items"][0]["sku"] = "abc-1"

    error = _error(create(order_schema), valid_order_data)

    assert error.path == "items[0].sku"
    assert error.expected.startswith("pattern ")


def test_numeric_bounds() -> None:
    class Measure(Schema):
        value = Schema.Number(
            minimum=0, maximum=10, exclusive_maximum=10, multiple_of=0.5
        )

    assert validate(create(Measure), {"value": 1.5})
    assert _error(create(Measure), {"value": -1}).expected == "minimum 0"
    assert _error(create(Measure), {"value": 11}).expected == "maximum 10"
    assert _error(create(Measure), {"value": 10}).expected == "exclusiveMaximum 10"
    assert _error(create(Measure), {"value": 1.2}).expected == "multipleOf 0.5"


def test_literal() -> None:
    class Versioned(Schema):
        version = Schema.Literal(2)

    assert validate(create(Versioned), {"version": 2})
    error = _error(create(Versioned), {"version": 3})
    assert error.kind is SchemaErrorKind.CONSTRAINT_VIOLATION
    assert error.expected == "const 2"


def test_root_must_be_an_object(user_schema) -> None:
    error = _error(create(user_schema), ["not", "an", "object"])

    assert error.path == ""
    assert error.message == "Type mismatch at <root>: expected object, got array"
    assert validate(create(user_schema), None) is False


def test_unknown_keys_are_ignored(user_schema, valid_user_data) -> None:
    assert validate(create(user_schema), {**valid_user_data, "extra": 1})


def test_schema_error_is_immutable_and_picklable() -> None:
    error = SchemaError.missing_field("name")

    assert isinstance(error, ValidationError)
    with pytest.raises(AttributeError):
        error.path = "other"  # type: ignore[misc]

    restored = pickle.loads(pickle.dumps(error))
    assert (restored.kind, restored.path, restored.message) == (
        SchemaErrorKind.MISSING_FIELD,
        "name",
        "Missing required field: name",
    )


class Bounded(Schema):
    code = Schema.String(max_length=3, optional=True)
    picks = Schema.Array(Schema.Integer(), max_items=2, optional=True)
    price = Schema.Number(exclusive_minimum=0, optional=True)


@pytest.mark.parametrize(
    ("data", "path", "expected", "received"),
    [
        ({"code": "abcd"}, "code", "maxLength 3", "abcd"),
        ({"picks": [1, 2, 3]}, "picks", "maxItems 2", 3),
        ({"price": 0}, "price", "exclusiveMinimum 0", 0),
        ({"price": -0.5}, "price", "exclusiveMinimum 0", -0.5),
    ],
)
def test_upper_and_exclusive_bounds(data, path, expected, received) -> None:
    error = _error(create(Bounded), data)

    assert error.kind is SchemaErrorKind.CONSTRAINT_VIOLATION
    assert error.path == path
    assert error.expected == expected
    assert error.received == received


@pytest.mark.parametrize(
    "data",
    [{"code": "abc"}, {"picks": [1, 2]}, {"price": 0.01}],
)
def test_values_at_bounds_pass(data) -> None:
    assert validate(create(Bounded), data)


@pytest.mark.parametrize(
    ("pinned", "value", "valid"),
    [
        (0, False, False),
        (False, 0, False),
        (0, -0.0, True),
        (-0.0, 0, True),
        (1, 1.0, True),
        (True, True, True),
    ],
)
def test_literal_equality_edge_cases(pinned, value, valid) -> None:
    class Pinned(Schema):
        x = Schema.Literal(pinned)

    assert validate(create(Pinned), {"x": value}) is valid


def test_unique_items_compares_objects_structurally() -> None:
    class Point(Schema):
        x = Schema.Number()

    class Path(Schema):
        points = Schema.Array(Schema.Object(Point), unique_items=True)

    error = _error(create(Path), {"points": [{"x": 1}, {"x": 1}]})

    assert error.expected == "uniqueItems"
    assert error.path == "points"
    assert validate(create(Path), {"points": [{"x": 1}, {"x": 2}]})
