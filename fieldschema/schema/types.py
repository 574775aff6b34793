"""
Field kinds and constraint option models.

Each field kind has a frozen pydantic model holding its constraint options.
Attribute names are snake_case; aliases carry the JSON Schema keyword so that
``model_dump(by_alias=True)`` yields draft 2020-12 vocabulary directly.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "JSON_SCHEMA_DIALECT",
    "FieldKind",
    "StringFormat",
    "BaseFieldOptions",
    "StringOptions",
    "NumberOptions",
    "IntegerOptions",
    "BooleanOptions",
    "ArrayOptions",
    "ObjectOptions",
    "EnumOptions",
]

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class FieldKind(str, Enum):
    """Kind of value a field descriptor holds."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"
    ENUM = "enum"
    LITERAL = "literal"


StringFormat = Literal[
    "date-time",
    "date",
    "time",
    "duration",
    "email",
    "idn-email",
    "hostname",
    "idn-hostname",
    "ipv4",
    "ipv6",
    "uri",
    "uri-reference",
    "iri",
    "iri-reference",
    "uuid",
    "json-pointer",
    "relative-json-pointer",
    "regex",
]

# Options that describe the field itself rather than constrain its value
_ANNOTATION_OPTIONS = {"description", "optional", "default"}


class BaseFieldOptions(BaseModel):
    """Options shared by all field kinds."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    description: str | None = None
    optional: bool = False

    @property
    def default_option(self) -> Any:
        """The declared ``default``, or None when the kind has none or none was given."""
        return getattr(self, "default", None)

    def json_constraints(self) -> dict[str, Any]:
        """Constraint keywords that are set, keyed by JSON Schema name."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=_ANNOTATION_OPTIONS)


class StringOptions(BaseFieldOptions):
    default: str | None = None
    min_length: int | None = Field(default=None, ge=0, alias="minLength")
    max_length: int | None = Field(default=None, ge=0, alias="maxLength")
    pattern: str | None = None
    format: StringFormat | None = None

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid regular expression: {e}") from e
        return value

    @model_validator(mode="after")
    def _length_bounds(self) -> StringOptions:
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError("min_length must not exceed max_length")
        return self


class NumberOptions(BaseFieldOptions):
    default: int | float | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: int | float | None = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: int | float | None = Field(default=None, alias="exclusiveMaximum")
    multiple_of: int | float | None = Field(default=None, gt=0, alias="multipleOf")


class IntegerOptions(NumberOptions):
    default: int | None = None


class BooleanOptions(BaseFieldOptions):
    default: bool | None = None


class ArrayOptions(BaseFieldOptions):
    min_items: int | None = Field(default=None, ge=0, alias="minItems")
    max_items: int | None = Field(default=None, ge=0, alias="maxItems")
    unique_items: bool | None = Field(default=None, alias="uniqueItems")

    @model_validator(mode="after")
    def _item_bounds(self) -> ArrayOptions:
        if (
            self.min_items is not None
            and self.max_items is not None
            and self.min_items > self.max_items
        ):
            raise ValueError("min_items must not exceed max_items")
        return self


class ObjectOptions(BaseFieldOptions):
    """Options for nested schema fields."""


class EnumOptions(BaseFieldOptions):
    default: Any = None
