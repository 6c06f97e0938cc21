"""Validation error raised when data does not match a schema."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from shape_validator.models import ValidationIssue
from shape_validator.rendering import Path, describe_kind, format_path, render_value


class ValidationError(Exception):
    """One or more validation issues, in the order they were detected.

    The issue sequence is fixed at construction and never empty.
    """

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        if not issues:
            raise ValueError("ValidationError requires at least one issue.")
        self._issues: tuple[ValidationIssue, ...] = tuple(issues)
        super().__init__("Validation failed")

    @property
    def issues(self) -> tuple[ValidationIssue, ...]:
        return self._issues

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __str__(self) -> str:
        lines = [f"Validation failed with {len(self._issues)} issue(s):"]
        lines.extend(f"  - {issue.message}" for issue in self._issues)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ValidationError(issues={list(self._issues)!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"issues": [issue.model_dump(mode="json") for issue in self._issues]}


def make_error(path: Path, expected: str, value: Any) -> ValidationError:
    """Build a single-issue error for a structural mismatch at *path*."""
    received = describe_kind(value)
    return ValidationError(
        [
            ValidationIssue(
                path=path,
                message=(
                    f'Invalid value at "{format_path(path)}": expected {expected}, '
                    f"received {received}. Value: {render_value(value)}"
                ),
                expected=expected,
                received=received,
            )
        ]
    )
