"""Pathfinding service: validation, size limits and off-loop execution."""

import logging
import random
from typing import Any, Optional, Sequence

from fastapi.concurrency import run_in_threadpool

from boonpath.config import Settings, get_settings
from boonpath.core import (
    GeneratedMaze,
    Grid,
    GridValidationError,
    PathResult,
    ReplayFrame,
    SearchReplay,
    find_path,
    generate_solvable_grid,
    load_all_grids,
    validate_matrix,
)

logger = logging.getLogger(__name__)


class GridTooLargeError(Exception):
    """Raised when a grid exceeds the configured size limits."""

    pass


class PathfindingService:
    """Service wrapping the synchronous search for use from async handlers."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._samples: Optional[dict[str, Grid]] = None

    def _check_size(self, rows: int, cols: int) -> None:
        if rows > self.settings.max_rows or cols > self.settings.max_cols:
            raise GridTooLargeError(
                f"Grid {rows}x{cols} exceeds limit "
                f"{self.settings.max_rows}x{self.settings.max_cols}"
            )

    def prepare_grid(self, matrix: Sequence[Sequence[Any]]) -> Grid:
        """
        Validate a raw matrix and enforce size limits.

        Raises:
            GridValidationError: If the matrix is malformed.
            GridTooLargeError: If the grid exceeds configured limits.
        """
        grid = validate_matrix(matrix)
        self._check_size(grid.rows, grid.cols)
        return grid

    async def find_path(self, grid: Grid, can_break_wall: bool) -> PathResult:
        """Run the search in a worker thread so the event loop stays free."""
        result = await run_in_threadpool(find_path, grid, can_break_wall)
        logger.info(
            f"Search {grid.rows}x{grid.cols} can_break_wall={can_break_wall}: "
            f"found={result.found} steps={result.steps} "
            f"explored={len(result.visited)}"
        )
        return result

    async def compare(self, grid: Grid) -> tuple[PathResult, PathResult]:
        """
        Search with and without the wall break.

        Returns:
            Tuple of (without_boon, with_boon) results.
        """
        without_boon = await self.find_path(grid, False)
        with_boon = await self.find_path(grid, True)
        return without_boon, with_boon

    async def replay_frame(
        self, grid: Grid, can_break_wall: bool, step: int
    ) -> ReplayFrame:
        """Search, then return the replay frame at a step."""
        result = await self.find_path(grid, can_break_wall)
        return SearchReplay(result).frame(step)

    async def generate_maze(
        self,
        rows: int,
        cols: int,
        wall_density: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> GeneratedMaze:
        """
        Generate a random grid that is solvable without breaking walls.

        Raises:
            GridValidationError: If dimensions are below the configured minimum.
            GridTooLargeError: If dimensions exceed configured limits.
        """
        minimum = self.settings.min_dimension
        if rows < minimum or cols < minimum:
            raise GridValidationError(
                f"Grid must be at least {minimum}x{minimum}, got {rows}x{cols}"
            )
        self._check_size(rows, cols)

        density = self.settings.wall_density if wall_density is None else wall_density
        rng = random.Random(seed)

        maze = await run_in_threadpool(
            generate_solvable_grid,
            rows,
            cols,
            density,
            rng,
            self.settings.generator_max_attempts,
        )
        logger.info(
            f"Generated {rows}x{cols} maze (density={density}, seed={seed}) "
            f"in {maze.attempts} attempt(s){' [fallback]' if maze.fallback else ''}"
        )
        return maze

    def get_samples(self) -> dict[str, Grid]:
        """Bundled sample grids, loaded once."""
        if self._samples is None:
            mazes_dir = self.settings.mazes_dir
            if mazes_dir.exists():
                self._samples = load_all_grids(mazes_dir)
            else:
                logger.warning(f"Mazes directory not found: {mazes_dir}")
                self._samples = {}
        return self._samples

    def get_sample(self, name: str) -> Optional[Grid]:
        return self.get_samples().get(name)


# Singleton instance
_pathfinding_service: Optional[PathfindingService] = None


def get_pathfinding_service() -> PathfindingService:
    """Get singleton pathfinding service."""
    global _pathfinding_service
    if _pathfinding_service is None:
        _pathfinding_service = PathfindingService()
    return _pathfinding_service
