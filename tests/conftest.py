from __future__ import annotations

import pytest

from fieldschema import Schema
from fieldschema.common.config import reset_settings


class Address(Schema):
    street = Schema.String(description="Street and number")
    city = Schema.String()


class User(Schema):
    name = Schema.String(min_length=1)
    age = Schema.Integer(minimum=0)
    email = Schema.String(format="email", optional=True)
    tags = Schema.Array(Schema.String(), min_items=1)
    role = Schema.Enum(["admin", "user", "guest"])
    address = Schema.Object(Address)


class LineItem(Schema):
    sku = Schema.String(pattern=r"^[A-Z]{3}-\d+$")
    quantity = Schema.Integer(minimum=1)
    price = Schema.Number(exclusive_minimum=0)


class Order(Schema):
    kind = Schema.Literal("order")
    items = Schema.Array(Schema.Object(LineItem))
    paid = Schema.Boolean(default=False)
    note = Schema.String(optional=True)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep each test independent of the developer's environment and cached settings."""
    for name in ("FIELDSCHEMA_LOG_LEVEL", "FIELDSCHEMA_STRICT_OUTPUT", "FIELDSCHEMA_INDENT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def address_schema() -> type[Address]:
    return Address


@pytest.fixture()
def user_schema() -> type[User]:
    return User


@pytest.fixture()
def line_item_schema() -> type[LineItem]:
    return LineItem


@pytest.fixture()
def order_schema() -> type[Order]:
    return Order


@pytest.fixture()
def valid_user_data() -> dict:
    return {
        "name": "Alice",
        "age": 30,
        "tags": ["a", "b"],
        "role": "admin",
        "address": {"street": "123 Main", "city": "Boston"},
    }


@pytest.fixture()
def valid_order_data() -> dict:
    return {
        "kind": "order",
        "items": [
            {"sku": "ABC-1", "quantity": 2, "price": 9.5},
            {"sku": "XYZ-42", "quantity": 1, "price": 120},
        ],
    }
