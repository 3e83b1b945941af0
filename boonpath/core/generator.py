"""
Random maze generator.

Scatters walls at random and keeps the first grid that is solvable without
breaking any wall. Gives up after a fixed number of attempts and returns an
all-free grid, which is always solvable.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .grid import CellValue, Grid
from .grid_parser import GridValidationError
from .pathfinder import find_path

logger = logging.getLogger(__name__)

DEFAULT_WALL_DENSITY = 0.25
DEFAULT_MAX_ATTEMPTS = 1000


@dataclass
class GeneratedMaze:
    """A generated grid plus how it was obtained."""
    grid: Grid
    attempts: int
    fallback: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "grid": self.grid.to_matrix(),
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "attempts": self.attempts,
            "fallback": self.fallback,
        }


def random_grid(
    rows: int,
    cols: int,
    wall_density: float = DEFAULT_WALL_DENSITY,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Draw one random grid.

    floor(rows * cols * wall_density) cells are drawn; draws landing on the
    start or goal are dropped, and repeated draws may hit the same cell.
    """
    rng = rng or random.Random()
    cells = [[CellValue.FREE] * cols for _ in range(rows)]
    start, goal = (0, 0), (rows - 1, cols - 1)

    for _ in range(int(rows * cols * wall_density)):
        row = rng.randrange(rows)
        col = rng.randrange(cols)
        if (row, col) in (start, goal):
            continue
        cells[row][col] = CellValue.WALL

    return Grid(cells)


def generate_solvable_grid(
    rows: int,
    cols: int,
    wall_density: float = DEFAULT_WALL_DENSITY,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeneratedMaze:
    """
    Generate a random grid that is solvable without breaking walls.

    Args:
        rows: Number of rows (>= 1).
        cols: Number of columns (>= 1).
        wall_density: Fraction of cells drawn as walls, in [0, 1).
        rng: Random source; pass a seeded random.Random for reproducible mazes.
        max_attempts: Attempts before falling back to an all-free grid.

    Returns:
        GeneratedMaze with the grid and the number of attempts used.

    Raises:
        GridValidationError: If dimensions or density are out of range.
    """
    if rows < 1 or cols < 1:
        raise GridValidationError(
            f"Grid must be at least 1x1, got {rows}x{cols}"
        )
    if not 0 <= wall_density < 1:
        raise GridValidationError(
            f"Wall density must be in [0, 1), got {wall_density}"
        )
    if max_attempts < 1:
        raise GridValidationError(
            f"max_attempts must be positive, got {max_attempts}"
        )

    rng = rng or random.Random()

    for attempt in range(1, max_attempts + 1):
        grid = random_grid(rows, cols, wall_density, rng)
        if find_path(grid, can_break_wall=False).found:
            logger.debug(
                f"Generated solvable {rows}x{cols} grid after {attempt} attempt(s)"
            )
            return GeneratedMaze(grid=grid, attempts=attempt)

    logger.warning(
        f"No solvable {rows}x{cols} grid after {max_attempts} attempts "
        f"(density={wall_density}), falling back to an open grid"
    )
    return GeneratedMaze(
        grid=Grid.empty(rows, cols),
        attempts=max_attempts,
        fallback=True,
    )
