"""Search result returned by the pathfinder."""

from dataclasses import dataclass, field
from typing import Optional

from .grid import Coordinate, Grid


@dataclass
class PathResult:
    """
    Outcome of a search.

    path is the start-to-goal route (empty when unreachable); visited is the
    discovery order of every dequeued state, populated even on failure.
    """
    path: list[Coordinate] = field(default_factory=list)
    visited: list[Coordinate] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "PathResult":
        return cls(path=[], visited=[])

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    @property
    def steps(self) -> Optional[int]:
        """Number of moves along the path, or None if no path was found."""
        if not self.found:
            return None
        return len(self.path) - 1

    def broken_walls(self, grid: Grid) -> list[Coordinate]:
        """
        Wall cells the path moves onto, in path order.

        The start cell is never moved onto, so a wall there is not counted.
        """
        return [coord for coord in self.path[1:] if grid.is_wall(coord)]

    def broken_wall(self, grid: Grid) -> Optional[Coordinate]:
        """The wall crossed by the path, if any."""
        walls = self.broken_walls(grid)
        return walls[0] if walls else None

    def to_dict(self, grid: Optional[Grid] = None) -> dict:
        """Convert to dictionary."""
        result = {
            "path": [list(coord) for coord in self.path],
            "visited": [list(coord) for coord in self.visited],
            "found": self.found,
            "steps": self.steps,
        }
        if grid is not None:
            wall = self.broken_wall(grid)
            result["broken_wall"] = list(wall) if wall else None
        return result
