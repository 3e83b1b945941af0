"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazeGenerateRequest(BaseModel):
    """Schema for generating a random solvable maze."""

    rows: int = Field(..., ge=1)
    cols: int = Field(..., ge=1)
    wall_density: Optional[float] = Field(None, ge=0, lt=1)
    seed: Optional[int] = None


class MazeGenerateResponse(BaseModel):
    """Schema for a generated maze."""

    grid: list[list[int]]
    rows: int
    cols: int
    attempts: int
    fallback: bool


class MazeSample(BaseModel):
    """Schema for a bundled sample grid."""

    name: str
    rows: int
    cols: int
    walls: int
    grid: list[list[int]]


class MazeSampleListItem(BaseModel):
    """Schema for sample list item (without grid data)."""

    name: str
    rows: int
    cols: int
    walls: int


class MazeSampleListResponse(BaseModel):
    """Schema for sample list response."""

    samples: list[MazeSampleListItem]
    total: int
