"""Construction helpers for every schema variant.

The :data:`validator` namespace is the public entry point::

    from shape_validator import validator

    user = validator.object({
        "id": validator.number(),
        "name": validator.string().refine(lambda s: len(s) >= 3, "Name too short"),
        "email": validator.string().optional(),
    })
    user.parse({"id": 1, "name": "Ada"})
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from shape_validator.errors import ValidationError
from shape_validator.schemas import (
    ArraySchema,
    BooleanSchema,
    DateSchema,
    EnumSchema,
    LiteralSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    UnionSchema,
)


class Validator:
    """Namespace of schema factories.

    Methods are named after the kinds they validate, so ``object`` and
    ``enum`` intentionally mirror the builtins only as attribute names.
    """

    ValidationError = ValidationError

    @staticmethod
    def string() -> StringSchema:
        return StringSchema()

    @staticmethod
    def number() -> NumberSchema:
        return NumberSchema()

    @staticmethod
    def boolean() -> BooleanSchema:
        return BooleanSchema()

    @staticmethod
    def date() -> DateSchema:
        return DateSchema()

    @staticmethod
    def array(element: Schema[Any]) -> ArraySchema:
        return ArraySchema(element)

    @staticmethod
    def object(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
        return ObjectSchema(shape)

    @staticmethod
    def literal(value: str | int | float | bool) -> LiteralSchema:
        return LiteralSchema(value)

    @staticmethod
    def union(options: Sequence[Schema[Any]]) -> UnionSchema:
        return UnionSchema(options)

    @staticmethod
    def enum(values: type[enum.Enum] | Mapping[Any, Any] | Iterable[Any]) -> EnumSchema:
        return EnumSchema(values)


validator = Validator()
