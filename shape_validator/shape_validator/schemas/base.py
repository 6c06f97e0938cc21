"""Abstract schema contract, refinement chain, and modifier wrappers.

Every schema variant subclasses :class:`Schema` and implements
:meth:`Schema._parse`, the structural check for a single node.  The
public pipeline is::

    parse(data) -> _parse_at((), data) -> _parse(path, data) + refinements

Array, object and modifier schemas validate their children through
``_parse_at`` with an extended path, so issue paths are always rooted at
the original input and those children's refinements apply.  Unions try
their options with the structural ``_parse`` only.

Refinements are the one mutable part of a schema.  Attach them before
the schema is first used; appending while a parse is running is not
supported.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from shape_validator.errors import ValidationError
from shape_validator.models import ValidationIssue
from shape_validator.rendering import Path, describe_kind
from shape_validator.results import ParseFailure, ParseResult, ParseSuccess
from shape_validator.sentinels import UNDEFINED

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_REFINEMENT_MESSAGE = "Refinement failed"


@dataclass(frozen=True)
class Refinement(Generic[T]):
    """A user predicate run after structural validation succeeds."""

    check: Callable[[T], bool]
    message: str = DEFAULT_REFINEMENT_MESSAGE


class Schema(abc.ABC, Generic[T]):
    """Abstract base for all schema variants."""

    def __init__(self) -> None:
        self._refinements: list[Refinement[T]] = []

    @abc.abstractmethod
    def _parse(self, path: Path, data: Any) -> T:
        """Structurally validate *data* located at *path*.

        Raises
        ------
        ValidationError
            If *data* does not have the shape this schema describes.
        """

    def _parse_at(self, path: Path, data: Any) -> T:
        value = self._parse(path, data)
        self._run_refinements(path, value)
        return value

    def _run_refinements(self, path: Path, value: T) -> None:
        for refinement in self._refinements:
            if not refinement.check(value):
                raise ValidationError(
                    [
                        ValidationIssue(
                            path=path,
                            message=refinement.message,
                            expected="refinement to pass",
                            received=describe_kind(value),
                        )
                    ]
                )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, data: Any) -> T:
        """Validate *data* and return the validated value.

        Raises
        ------
        ValidationError
            If *data* fails a structural check or a refinement.
        """
        return self._parse_at((), data)

    def safe_parse(self, data: Any) -> ParseResult:
        """Validate *data* without raising on validation failure.

        Only :class:`ValidationError` is converted into a
        :class:`ParseFailure`; any other exception propagates.
        """
        try:
            value = self._parse_at((), data)
        except ValidationError as exc:
            logger.debug("%r rejected input with %d issue(s)", self, len(exc.issues))
            return ParseFailure(error=exc)
        return ParseSuccess(data=value)

    def optional(self) -> OptionalSchema[T]:
        """Return a new schema that also accepts :data:`UNDEFINED`."""
        return OptionalSchema(self)

    def nullable(self) -> NullableSchema[T]:
        """Return a new schema that also accepts ``None``."""
        return NullableSchema(self)

    def refine(self, check: Callable[[T], bool], message: str = DEFAULT_REFINEMENT_MESSAGE) -> Schema[T]:
        """Attach a predicate to this schema and return the same schema.

        Refinements run in the order they were added, after structural
        validation succeeds.  The first falsy result fails the parse with
        *message*; later refinements are not evaluated.
        """
        if not callable(check):
            raise TypeError(f"Refinement check must be callable, got {type(check).__name__}.")
        self._refinements.append(Refinement(check=check, message=message))
        return self

    @property
    def refinements(self) -> tuple[Refinement[T], ...]:
        return tuple(self._refinements)


def ensure_schema(candidate: Any, role: str) -> Schema[Any]:
    """Return *candidate* if it is a schema, else raise ``TypeError``."""
    if not isinstance(candidate, Schema):
        raise TypeError(f"{role} must be a Schema instance, got {type(candidate).__name__}.")
    return candidate


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class OptionalSchema(Schema[T | None]):
    """Wraps another schema to also accept :data:`UNDEFINED`."""

    def __init__(self, inner: Schema[T]) -> None:
        super().__init__()
        self._inner = ensure_schema(inner, "Optional inner schema")

    @property
    def inner(self) -> Schema[T]:
        return self._inner

    def _parse(self, path: Path, data: Any) -> Any:
        if data is UNDEFINED:
            return UNDEFINED
        return self._inner._parse_at(path, data)

    def __repr__(self) -> str:
        return f"{self._inner!r}.optional()"


class NullableSchema(Schema[T | None]):
    """Wraps another schema to also accept ``None``."""

    def __init__(self, inner: Schema[T]) -> None:
        super().__init__()
        self._inner = ensure_schema(inner, "Nullable inner schema")

    @property
    def inner(self) -> Schema[T]:
        return self._inner

    def _parse(self, path: Path, data: Any) -> T | None:
        if data is None:
            return None
        return self._inner._parse_at(path, data)

    def __repr__(self) -> str:
        return f"{self._inner!r}.nullable()"
