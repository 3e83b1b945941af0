"""
Augmented BFS pathfinder.

Breadth-first search over (coordinate, walls_broken) states. Moving onto a
free cell is always allowed; moving onto a wall is allowed once per path when
wall breaking is enabled. Every dequeued coordinate is recorded so callers can
replay the exploration.
"""

import logging
from collections import deque
from typing import Sequence, Union

from .grid import CellValue, Coordinate, Grid, SearchState
from .result import PathResult

logger = logging.getLogger(__name__)

MAX_WALL_BREAKS = 1


def _as_grid(grid: Union[Grid, Sequence[Sequence[int]]]) -> Grid:
    if isinstance(grid, Grid):
        return grid
    return Grid.from_matrix(grid)


def find_path(
    grid: Union[Grid, Sequence[Sequence[int]]],
    can_break_wall: bool = False,
) -> PathResult:
    """
    Find the shortest path from the top-left to the bottom-right cell.

    Args:
        grid: Grid or rectangular matrix of 0 (free) / 1 (wall) values.
        can_break_wall: Allow the path to pass through at most one wall.

    Returns:
        PathResult with the path (empty if unreachable) and the discovery order.
    """
    grid = _as_grid(grid)
    if grid.is_empty:
        return PathResult.empty()

    goal = grid.goal

    # visited[row][col][walls_broken]
    visited = [
        [[False] * (MAX_WALL_BREAKS + 1) for _ in range(grid.cols)]
        for _ in range(grid.rows)
    ]

    start = SearchState(grid.start, 0)
    queue: deque[tuple[SearchState, list[Coordinate]]] = deque(
        [(start, [start.coord])]
    )
    visited[0][0][0] = True

    exploration_order: list[Coordinate] = []

    while queue:
        state, path = queue.popleft()
        exploration_order.append(state.coord)

        if state.coord == goal:
            logger.debug(
                f"Path found on {grid.rows}x{grid.cols} grid "
                f"(can_break_wall={can_break_wall}): {len(path) - 1} steps, "
                f"{len(exploration_order)} states explored"
            )
            return PathResult(path=path, visited=exploration_order)

        for neighbor in grid.neighbors(state.coord):
            row, col = neighbor
            new_path = path + [neighbor]

            if grid.cell(neighbor) is CellValue.FREE:
                if not visited[row][col][state.walls_broken]:
                    visited[row][col][state.walls_broken] = True
                    queue.append(
                        (SearchState(neighbor, state.walls_broken), new_path)
                    )
            elif (
                can_break_wall
                and state.walls_broken < MAX_WALL_BREAKS
                and not visited[row][col][state.walls_broken + 1]
            ):
                visited[row][col][state.walls_broken + 1] = True
                queue.append(
                    (SearchState(neighbor, state.walls_broken + 1), new_path)
                )

    logger.debug(
        f"No path on {grid.rows}x{grid.cols} grid "
        f"(can_break_wall={can_break_wall}), "
        f"{len(exploration_order)} states explored"
    )
    return PathResult(path=[], visited=exploration_order)
