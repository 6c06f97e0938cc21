"""Issue model shared by every schema variant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValidationIssue(BaseModel):
    """A single located validation failure."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str | int, ...] = Field(
        default=(),
        description="Keys and indices from the root of the input to the invalid value.",
    )
    message: str = Field(..., description="Human-readable description of the failure.")
    expected: str = Field(..., description="The kind or value the schema expected.")
    received: str = Field(..., description="The runtime kind that was actually found.")
