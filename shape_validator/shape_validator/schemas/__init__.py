"""Schema variants.

All variants share the :class:`Schema` contract: ``parse``,
``safe_parse``, ``optional``, ``nullable`` and ``refine``.
"""

from shape_validator.schemas.base import (
    NullableSchema,
    OptionalSchema,
    Refinement,
    Schema,
)
from shape_validator.schemas.choices import EnumSchema, LiteralSchema, UnionSchema
from shape_validator.schemas.containers import ArraySchema, ObjectSchema
from shape_validator.schemas.primitives import (
    BooleanSchema,
    DateSchema,
    NumberSchema,
    StringSchema,
)

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "DateSchema",
    "EnumSchema",
    "LiteralSchema",
    "NullableSchema",
    "NumberSchema",
    "ObjectSchema",
    "OptionalSchema",
    "Refinement",
    "Schema",
    "StringSchema",
    "UnionSchema",
]
