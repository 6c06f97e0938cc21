"""Result models returned by ``Schema.safe_parse``."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from shape_validator.errors import ValidationError


class ParseSuccess(BaseModel):
    """The input matched the schema."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    data: Any = Field(default=None, description="The validated value.")

    def unwrap(self) -> Any:
        """Return the validated value."""
        return self.data


class ParseFailure(BaseModel):
    """The input did not match the schema."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: Literal[False] = False
    error: ValidationError = Field(..., description="The issues that caused the failure.")

    def unwrap(self) -> Any:
        """Raise the captured :class:`ValidationError`."""
        raise self.error


ParseResult = Union[ParseSuccess, ParseFailure]
