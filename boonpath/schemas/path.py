"""Path search schemas for request/response validation."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, StrictInt


class PathRequest(BaseModel):
    """Schema for a path search request."""

    grid: list[list[StrictInt]] = Field(
        ...,
        description="Rectangular matrix, 0 = free, 1 = wall",
    )
    can_break_wall: bool = False


class ReplayRequest(PathRequest):
    """Schema for requesting one replay frame."""

    step: int = Field(..., ge=0)


class PathResponse(BaseModel):
    """Schema for a path search result."""

    path: list[tuple[int, int]]
    visited: list[tuple[int, int]]
    found: bool
    steps: Optional[int] = None
    broken_wall: Optional[tuple[int, int]] = None


class PathComparisonResponse(BaseModel):
    """Schema for the with/without wall-break comparison."""

    without_boon: PathResponse
    with_boon: PathResponse
    steps_saved: Optional[int] = None


class ReplayFrameResponse(BaseModel):
    """Schema for a single replay frame."""

    step: int
    total_steps: int
    phase: Literal["idle", "exploring", "solving", "done"]
    visited: list[tuple[int, int]]
    path: list[tuple[int, int]]
