"""shape_validator -- composable runtime validation for untrusted data.

Quick start::

    from shape_validator import validator

    schema = validator.array(validator.union([validator.string(), validator.number()]))
    result = schema.safe_parse(["a", 1, None])
    if not result.success:
        for issue in result.error.issues:
            print(issue.path, issue.message)

Object schemas report an omitted ``optional()`` field as ``UNDEFINED``
rather than dropping the key.  Filter it out before ``json.dumps``::

    from shape_validator import UNDEFINED

    user = validator.object({"name": validator.string(), "age": validator.number().optional()})
    data = user.parse({"name": "Ada"})
    payload = {key: value for key, value in data.items() if value is not UNDEFINED}
"""

__version__ = "0.2.2"

from shape_validator.config import ValidatorSettings, get_settings, load_settings
from shape_validator.errors import ValidationError
from shape_validator.factories import Validator, validator
from shape_validator.models import ValidationIssue
from shape_validator.results import ParseFailure, ParseResult, ParseSuccess
from shape_validator.schemas import (
    ArraySchema,
    BooleanSchema,
    DateSchema,
    EnumSchema,
    LiteralSchema,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    Refinement,
    Schema,
    StringSchema,
    UnionSchema,
)
from shape_validator.sentinels import UNDEFINED

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
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "Refinement",
    "Schema",
    "StringSchema",
    "UNDEFINED",
    "UnionSchema",
    "ValidationError",
    "ValidationIssue",
    "Validator",
    "ValidatorSettings",
    "get_settings",
    "load_settings",
    "validator",
]
