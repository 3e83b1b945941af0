"""
Boonpath Grid Model

Defines the searchable state space for the wall-break pathfinder:
- Cell values (free / wall)
- Coordinates and the fixed neighbor enumeration order
- Search states (coordinate + walls-broken flag)

Grid Format:
    Rows of 0/1 values, 0 = free, 1 = wall.
    Start is always (0, 0), goal is always (last_row, last_col).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union


Coordinate = tuple[int, int]


class CellValue(Enum):
    """Types of cells in the grid."""
    FREE = 0
    WALL = 1

    @property
    def char(self) -> str:
        """Character used when rendering the grid."""
        return "X" if self is CellValue.WALL else "."


class Direction(Enum):
    """Movement directions, declared in neighbor enumeration order."""
    EAST = "east"
    WEST = "west"
    SOUTH = "south"
    NORTH = "north"

    @property
    def delta(self) -> Coordinate:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.EAST: (0, 1),
            Direction.WEST: (0, -1),
            Direction.SOUTH: (1, 0),
            Direction.NORTH: (-1, 0),
        }
        return deltas[self]


# Fixed order: it decides which equal-length path wins and the trace order.
NEIGHBOR_ORDER: tuple[Direction, ...] = (
    Direction.EAST,
    Direction.WEST,
    Direction.SOUTH,
    Direction.NORTH,
)


@dataclass(frozen=True)
class SearchState:
    """A grid coordinate paired with the number of walls broken to reach it."""
    coord: Coordinate
    walls_broken: int = 0


class Grid:
    """
    Immutable rectangular grid of cells.

    Example usage:
        grid = Grid.from_matrix([[0, 1], [0, 0]])
        grid.neighbors((0, 0))  # [(0, 1), (1, 0)]
    """

    def __init__(self, cells: Sequence[Sequence[CellValue]]):
        self._cells: tuple[tuple[CellValue, ...], ...] = tuple(
            tuple(row) for row in cells
        )
        self.rows: int = len(self._cells)
        self.cols: int = len(self._cells[0]) if self._cells else 0

    @classmethod
    def from_matrix(cls, matrix: Iterable[Iterable[Union[int, CellValue]]]) -> "Grid":
        """Build a grid from nested 0/1 values (or CellValue members)."""
        return cls(
            [[CellValue(value) for value in row] for row in matrix]
        )

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """All-free grid of the given size."""
        return cls([[CellValue.FREE] * cols for _ in range(rows)])

    @property
    def is_empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    @property
    def start(self) -> Coordinate:
        return (0, 0)

    @property
    def goal(self) -> Coordinate:
        return (self.rows - 1, self.cols - 1)

    def in_bounds(self, coord: Coordinate) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, coord: Coordinate) -> CellValue:
        """Get cell value at a coordinate."""
        row, col = coord
        return self._cells[row][col]

    def is_wall(self, coord: Coordinate) -> bool:
        return self.cell(coord) is CellValue.WALL

    def neighbors(self, coord: Coordinate) -> list[Coordinate]:
        """In-bounds adjacent coordinates: east, west, south, north."""
        row, col = coord
        result = []
        for direction in NEIGHBOR_ORDER:
            d_row, d_col = direction.delta
            candidate = (row + d_row, col + d_col)
            if self.in_bounds(candidate):
                result.append(candidate)
        return result

    def coordinates(self) -> Iterator[Coordinate]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def wall_count(self) -> int:
        return sum(1 for coord in self.coordinates() if self.is_wall(coord))

    def with_cell(self, coord: Coordinate, value: CellValue) -> "Grid":
        """Return a copy with one cell replaced."""
        row, col = coord
        cells = [list(r) for r in self._cells]
        cells[row][col] = value
        return Grid(cells)

    def to_matrix(self) -> list[list[int]]:
        """Convert to nested lists of 0/1."""
        return [[cell.value for cell in row] for row in self._cells]

    def render(
        self,
        path: Optional[Iterable[Coordinate]] = None,
        visited: Optional[Iterable[Coordinate]] = None,
    ) -> str:
        """
        Generate ASCII visualization of the grid.

        Args:
            path: If provided, path cells are drawn as "*" ("!" for a broken wall).
            visited: If provided, explored free cells are drawn as "o".

        Returns:
            ASCII string representation.
        """
        path_cells = set(path or ())
        visited_cells = set(visited or ())

        lines = []
        for row in range(self.rows):
            line = ""
            for col in range(self.cols):
                coord = (row, col)
                cell = self.cell(coord)
                if coord in path_cells:
                    line += "!" if cell is CellValue.WALL else "*"
                elif coord in visited_cells and cell is CellValue.FREE:
                    line += "o"
                else:
                    line += cell.char
            lines.append(line)

        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"<Grid {self.rows}x{self.cols}>"
