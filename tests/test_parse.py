from __future__ import annotations

import pytest

from fieldschema import Schema, SchemaError, ValidationError
from fieldschema.schema import create, get_raw_instance, is_proxied, parse, parse_json, to_object


def test_parse_populates_fields(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    parse(user, valid_user_data)

    assert user.name == "Alice"
    assert user.age == 30
    assert user.tags == ["a", "b"]
    assert user.role == "admin"
    assert user.address.street == "123 Main"
    assert user.address.city == "Boston"


def test_parse_builds_nested_schema_instances(user_schema, address_schema, valid_user_data) -> None:
    user = create(user_schema)
    parse(user, valid_user_data)

    nested = get_raw_instance(user).address.value
    assert isinstance(nested, address_schema)
    assert nested.city.value == "Boston"


def test_parse_builds_instances_inside_arrays(order_schema, line_item_schema, valid_order_data) -> None:
    order = create(order_schema)
    parse(order, valid_order_data)

    assert all(isinstance(item, line_item_schema) for item in order.items)
    assert [item.sku.value for item in order.items] == ["ABC-1", "XYZ-42"]
    assert to_object(order)["items"][1] == {"sku": "XYZ-42", "quantity": 1, "price": 120}


def test_failed_parse_leaves_instance_untouched(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    user.name = "Before"

    with pytest.raises(SchemaError):
        parse(user, {**valid_user_data, "name": "After", "role": "superadmin"})

    assert user.name == "Before"
    assert user.age == 0


def test_omitted_fields_keep_current_values(order_schema) -> None:
    order = create(order_schema)
    order.note = "keep me"
    order.paid = True

    parse(order, {"kind": "order", "items": []})

    assert order.note == "keep me"
    assert order.paid is True


def test_null_on_optional_field_keeps_current_value(order_schema) -> None:
    order = create(order_schema)
    order.note = "keep me"

    parse(order, {"kind": "order", "items": [], "note": None})

    assert order.note == "keep me"


def test_parse_copies_input_containers(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    parse(user, valid_user_data)

    valid_user_data["tags"].append("mutated")
    valid_user_data["address"]["city"] = "Mutated"

    assert user.tags == ["a", "b"]
    assert user.address.city == "Boston"


def test_parse_accepts_raw_instances(address_schema) -> None:
    raw = address_schema()
    parse(raw, {"street": "1 Loop", "city": "Cupertino"})

    assert raw.street.value == "1 Loop"


def test_parse_then_to_object_round_trip(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    parse(user, valid_user_data)

    assert to_object(user) == {**valid_user_data, "email": ""}


def test_parse_json_strips_markdown(address_schema) -> None:
    content = 'Here you go:\n```json\n{"street": "123 Main", "city": "Boston"}\n```'

    address = parse_json(create(address_schema), content)

    assert is_proxied(address)
    assert address.city == "Boston"


def test_parse_json_rejects_invalid_json(address_schema) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_json(create(address_schema), '{"street": ')

    assert not isinstance(exc_info.value, SchemaError)
    assert exc_info.value.message.startswith("JSON parsing error")


def test_parse_json_reports_schema_errors(address_schema) -> None:
    with pytest.raises(SchemaError) as exc_info:
        parse_json(create(address_schema), '{"street": "x"}')

    assert exc_info.value.path == "city"


def test_parse_inherited_schema() -> None:
    class Base(Schema):
        id = Schema.Integer()

    class Named(Base):
        name = Schema.String()

    named = create(Named)
    parse(named, {"id": 7, "name": "seven"})

    assert to_object(named) == {"id": 7, "name": "seven"}
