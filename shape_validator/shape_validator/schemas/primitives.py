"""Leaf schemas that check a single runtime kind."""

from __future__ import annotations

import datetime
import math
from typing import Any

from shape_validator.errors import make_error
from shape_validator.rendering import Path
from shape_validator.schemas.base import Schema


class StringSchema(Schema[str]):
    """Accepts ``str`` values."""

    def _parse(self, path: Path, data: Any) -> str:
        if not isinstance(data, str):
            raise make_error(path, "string", data)
        return data

    def __repr__(self) -> str:
        return "string()"


class NumberSchema(Schema[float]):
    """Accepts ``int`` and ``float`` values.

    ``bool`` is rejected even though it subclasses ``int``, and so is NaN.
    Infinities are accepted.
    """

    def _parse(self, path: Path, data: Any) -> float:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise make_error(path, "number", data)
        if isinstance(data, float) and math.isnan(data):
            raise make_error(path, "number", data)
        return data

    def __repr__(self) -> str:
        return "number()"


class BooleanSchema(Schema[bool]):
    """Accepts ``True`` and ``False`` only."""

    def _parse(self, path: Path, data: Any) -> bool:
        if not isinstance(data, bool):
            raise make_error(path, "boolean", data)
        return data

    def __repr__(self) -> str:
        return "boolean()"


class DateSchema(Schema[datetime.date]):
    """Accepts ``datetime.date`` and ``datetime.datetime`` values.

    Date-likes with an invalid timestamp (``pandas.NaT`` and friends)
    subclass ``datetime`` but never compare equal to themselves; those
    are rejected.
    """

    def _parse(self, path: Path, data: Any) -> datetime.date:
        if not isinstance(data, datetime.date) or data != data:
            raise make_error(path, "date", data)
        return data

    def __repr__(self) -> str:
        return "date()"
