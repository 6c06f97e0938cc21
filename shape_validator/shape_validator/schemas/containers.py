"""Array and object schemas.

Both are fail-fast: the first element or field that fails stops
validation and its issues propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from shape_validator.errors import make_error
from shape_validator.rendering import Path
from shape_validator.schemas.base import Schema, ensure_schema
from shape_validator.sentinels import UNDEFINED


class ArraySchema(Schema[list]):
    """Validates a ``list`` or ``tuple`` element by element.

    Always returns a new ``list``.
    """

    def __init__(self, element: Schema[Any]) -> None:
        super().__init__()
        self._element = ensure_schema(element, "Array element schema")

    @property
    def element(self) -> Schema[Any]:
        return self._element

    def _parse(self, path: Path, data: Any) -> list:
        if not isinstance(data, (list, tuple)):
            raise make_error(path, "array", data)
        return [self._element._parse_at((*path, index), item) for index, item in enumerate(data)]

    def __repr__(self) -> str:
        return f"array({self._element!r})"


class ObjectSchema(Schema[dict]):
    """Validates a mapping against a fixed shape of named fields.

    Fields are checked in declaration order.  A key missing from the input
    is validated as :data:`UNDEFINED`, so only ``optional()`` fields may
    be omitted.  Keys not declared in the shape are dropped: the returned
    ``dict`` holds exactly the declared keys.

    An omitted ``optional()`` field appears in the result as
    :data:`UNDEFINED`, which ``json.dumps`` cannot encode.  Drop those
    entries before serializing::

        {key: value for key, value in data.items() if value is not UNDEFINED}
    """

    def __init__(self, shape: Mapping[str, Schema[Any]]) -> None:
        super().__init__()
        if not isinstance(shape, Mapping):
            raise TypeError(f"Object shape must be a mapping, got {type(shape).__name__}.")
        fields: dict[str, Schema[Any]] = {}
        for key, schema in shape.items():
            if not isinstance(key, str):
                raise TypeError(f"Object shape keys must be strings, got {type(key).__name__}.")
            fields[key] = ensure_schema(schema, f"Object field {key!r}")
        self._shape = fields

    @property
    def shape(self) -> Mapping[str, Schema[Any]]:
        return MappingProxyType(self._shape)

    def _parse(self, path: Path, data: Any) -> dict:
        if not isinstance(data, Mapping):
            raise make_error(path, "object", data)
        result: dict[str, Any] = {}
        for key, schema in self._shape.items():
            result[key] = schema._parse_at((*path, key), data.get(key, UNDEFINED))
        return result

    def __repr__(self) -> str:
        fields = ", ".join(f"{key!r}: {schema!r}" for key, schema in self._shape.items())
        return f"object({{{fields}}})"
