"""Schemas that accept one of a fixed set of values or shapes.

* :class:`LiteralSchema` -- exactly one primitive value.
* :class:`EnumSchema` -- membership in a closed set of values.
* :class:`UnionSchema` -- the first of several schemas that matches.

Value comparisons are kind-strict: ``True`` never matches ``1`` and
``0`` never matches ``False``, even though Python treats them as equal.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from shape_validator.errors import ValidationError, make_error
from shape_validator.models import ValidationIssue
from shape_validator.rendering import Path, describe_kind, format_path, render_value
from shape_validator.schemas.base import Schema, ensure_schema

logger = logging.getLogger(__name__)

_LITERAL_TYPES = (str, int, float, bool)


def _same_value(left: Any, right: Any) -> bool:
    """Equality that keeps booleans and numbers apart."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


# ---------------------------------------------------------------------------
# Literal
# ---------------------------------------------------------------------------


class LiteralSchema(Schema[Any]):
    """Accepts a single ``str``, ``int``, ``float`` or ``bool`` value."""

    def __init__(self, value: str | int | float | bool) -> None:
        super().__init__()
        if not isinstance(value, _LITERAL_TYPES):
            raise TypeError(f"Literal value must be a str, int, float or bool, got {type(value).__name__}.")
        self._value = value

    @property
    def value(self) -> str | int | float | bool:
        return self._value

    @property
    def expected(self) -> str:
        return f"literal {json.dumps(self._value)}"

    def _parse(self, path: Path, data: Any) -> Any:
        if not _same_value(data, self._value):
            raise make_error(path, self.expected, data)
        return self._value

    def __repr__(self) -> str:
        return f"literal({self._value!r})"


# ---------------------------------------------------------------------------
# Enum
# ---------------------------------------------------------------------------


class EnumSchema(Schema[Any]):
    """Accepts any value of an enumeration.

    *values* may be an :class:`enum.Enum` subclass, a mapping (whose values
    are used), or any other iterable of values.  When an ``Enum`` class is
    given, its members are accepted as well as their raw values.
    """

    def __init__(self, values: type[enum.Enum] | Mapping[Any, Any] | Iterable[Any]) -> None:
        super().__init__()
        self._enum_cls: type[enum.Enum] | None = None
        if isinstance(values, type) and issubclass(values, enum.Enum):
            self._enum_cls = values
            permitted = [member.value for member in values]
        elif isinstance(values, Mapping):
            permitted = list(values.values())
        elif isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise TypeError(f"Enum values must be an Enum class or an iterable, got {type(values).__name__}.")
        else:
            permitted = list(values)

        if not permitted:
            raise ValueError("Enum schema requires at least one permitted value.")

        self._values: tuple[Any, ...] = tuple(permitted)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def expected(self) -> str:
        rendered = render_value(list(self._values))
        if self._enum_cls is not None:
            return f"enum {self._enum_cls.__name__} {rendered}"
        return f"enum {rendered}"

    def _parse(self, path: Path, data: Any) -> Any:
        if self._enum_cls is not None and isinstance(data, self._enum_cls):
            return data
        if not any(_same_value(data, value) for value in self._values):
            raise make_error(path, self.expected, data)
        return data

    def __repr__(self) -> str:
        if self._enum_cls is not None:
            return f"enum({self._enum_cls.__name__})"
        return f"enum({list(self._values)!r})"


# ---------------------------------------------------------------------------
# Union
# ---------------------------------------------------------------------------


class UnionSchema(Schema[Any]):
    """Returns the result of the first option that accepts the input.

    Options are tried in order against the same path using their
    structural check only; refinements attached to an option are not run.
    Refinements attached to the union itself run on the chosen value.  When
    every option fails, the raised error carries the issues of all options,
    in option order.
    """

    def __init__(self, options: Sequence[Schema[Any]]) -> None:
        super().__init__()
        if isinstance(options, Schema) or not isinstance(options, Iterable):
            raise TypeError("Union options must be a sequence of Schema instances.")
        self._options = tuple(ensure_schema(option, "Union option") for option in options)
        if not self._options:
            raise ValueError("Union schema requires at least one option.")

    @property
    def options(self) -> tuple[Schema[Any], ...]:
        return self._options

    def _parse(self, path: Path, data: Any) -> Any:
        issues: list[ValidationIssue] = []
        for option in self._options:
            try:
                return option._parse(path, data)
            except ValidationError as exc:
                issues.extend(exc.issues)

        logger.debug(
            "No union option matched %s at %r (%d issue(s))",
            describe_kind(data),
            format_path(path),
            len(issues),
        )
        raise ValidationError(issues)

    def __repr__(self) -> str:
        return f"union([{', '.join(repr(option) for option in self._options)}])"
