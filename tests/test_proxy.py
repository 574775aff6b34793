from __future__ import annotations

import copy

import pytest

from fieldschema import ConfigurationError, Schema
from fieldschema.schema import (
    FieldDescriptor,
    Proxied,
    create,
    create_proxy,
    get_raw_instance,
    is_proxied,
    is_schema_instance,
    parse,
)


def test_create_returns_proxied_instance_with_defaults(user_schema) -> None:
    user = create(user_schema)

    assert is_proxied(user)
    assert user.name == ""
    assert user.age == 0
    assert user.tags == []
    assert user.role == "admin"
    assert is_proxied(user.address)
    assert user.address.city == ""


def test_assignment_writes_descriptor_value(user_schema) -> None:
    user = create(user_schema)
    user.name = "Alice"
    user.address.city = "Boston"

    raw = get_raw_instance(user)
    assert isinstance(raw.name, FieldDescriptor)
    assert raw.name.value == "Alice"
    assert get_raw_instance(raw.address.value).city.value == "Boston"


def test_assignment_is_not_validated(user_schema) -> None:
    user = create(user_schema)
    user.age = "not a number"

    assert user.age == "not a number"


def test_instances_do_not_share_values(user_schema) -> None:
    first = create(user_schema)
    second = create(user_schema)
    first.tags.append("x")
    first.address.city = "Paris"

    assert second.tags == []
    assert second.address.city == ""


def test_field_table_keeps_declaration_order_with_inheritance() -> None:
    class Base(Schema):
        id = Schema.Integer()
        created = Schema.String()

    class Child(Base):
        name = Schema.String()

    assert list(create(Child)) == ["id", "created", "name"]
    assert "name" in create(Child)
    assert "missing" not in create(Child)


def test_fields_cannot_be_deleted(user_schema) -> None:
    user = create(user_schema)

    with pytest.raises(AttributeError):
        del user.name


def test_get_raw_instance_accepts_raw_and_proxied(user_schema) -> None:
    raw = user_schema()
    proxied = create_proxy(raw)

    assert get_raw_instance(proxied) is raw
    assert get_raw_instance(raw) is raw
    assert is_schema_instance(raw)
    assert not is_schema_instance(proxied)


def test_create_rejects_non_schema_classes() -> None:
    with pytest.raises(ConfigurationError):
        create(dict)  # type: ignore[arg-type]


def test_create_proxy_rejects_non_instances() -> None:
    with pytest.raises(ConfigurationError):
        create_proxy({"name": "x"})  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        get_raw_instance(object())  # type: ignore[arg-type]


def test_proxied_repr_shows_values(address_schema) -> None:
    address = create(address_schema)
    address.city = "Oslo"

    assert isinstance(address, Proxied)
    assert "city='Oslo'" in repr(address)


def test_proxied_instances_support_copy_and_deepcopy(user_schema, valid_user_data) -> None:
    user = create(user_schema)
    parse(user, valid_user_data)

    shallow = copy.copy(user)
    deep = copy.deepcopy(user)
    deep.tags.append("deep-only")
    deep.address.city = "Paris"

    assert is_proxied(deep)
    assert get_raw_instance(shallow) is get_raw_instance(user)
    assert get_raw_instance(deep) is not get_raw_instance(user)
    assert user.tags == ["a", "b"]
    assert user.address.city == "Boston"
    assert deep.name == "Alice"
