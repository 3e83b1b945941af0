"""
Grid Parser for Boonpath.

Loads and validates grids before they reach the pathfinder, which assumes
well-formed input.

Grid Format (one row per line):
    . or 0 or space = Free cell
    X or # or 1     = Wall
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from .grid import CellValue, Grid

logger = logging.getLogger(__name__)


class GridParseError(Exception):
    """Exception raised when grid parsing fails."""

    pass


class GridValidationError(Exception):
    """Exception raised when grid validation fails."""

    pass


CHAR_VALUES = {
    ".": CellValue.FREE,
    "0": CellValue.FREE,
    " ": CellValue.FREE,
    "X": CellValue.WALL,
    "#": CellValue.WALL,
    "1": CellValue.WALL,
}


def parse_grid_text(grid_text: str) -> Grid:
    """
    Parse grid text into a Grid.

    Args:
        grid_text: Multi-line string, one row per line.

    Returns:
        Parsed Grid.

    Raises:
        GridParseError: If the text is empty.
        GridValidationError: If rows are ragged or contain unknown characters.
    """
    if not grid_text or not grid_text.strip("\r\n"):
        raise GridParseError("Grid text is empty")

    # Only strip line breaks: a leading space is a free cell
    lines = grid_text.strip("\r\n").splitlines()
    width = len(lines[0])

    cells = []
    for row, line in enumerate(lines):
        if len(line) != width:
            raise GridValidationError(
                f"Row {row} has {len(line)} cells, expected {width}"
            )
        cell_row = []
        for col, char in enumerate(line):
            if char not in CHAR_VALUES:
                raise GridValidationError(
                    f"Invalid character '{char}' at position ({row}, {col}). "
                    f"Valid characters: {', '.join(repr(c) for c in sorted(CHAR_VALUES))}"
                )
            cell_row.append(CHAR_VALUES[char])
        cells.append(cell_row)

    return Grid(cells)


def validate_matrix(matrix: Sequence[Sequence[Any]]) -> Grid:
    """
    Check that a matrix is rectangular and only holds 0/1, then build a Grid.

    An empty matrix (or one with empty rows) is valid and yields an empty grid.

    Raises:
        GridValidationError: If the matrix is ragged or holds other values.
    """
    if len(matrix) == 0:
        return Grid([])

    width = len(matrix[0])
    for row, values in enumerate(matrix):
        if len(values) != width:
            raise GridValidationError(
                f"Grid is not rectangular: row {row} has {len(values)} cells, "
                f"expected {width}"
            )
        for col, value in enumerate(values):
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or value not in (0, 1):
                raise GridValidationError(
                    f"Invalid cell value {value!r} at position ({row}, {col}). "
                    f"Cells must be 0 (free) or 1 (wall)"
                )

    return Grid.from_matrix(matrix)


def load_grid_file(file_path: Path | str) -> Grid:
    """
    Load and parse a grid file from the filesystem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        GridParseError: If the grid cannot be parsed.
        GridValidationError: If the grid is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Grid file not found: {file_path}")

    if not file_path.is_file():
        raise GridParseError(f"Path is not a file: {file_path}")

    try:
        grid_text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise GridParseError(f"Failed to read grid file: {e}") from e

    return parse_grid_text(grid_text)


def load_all_grids(grids_dir: Path | str) -> dict[str, Grid]:
    """
    Load all grid files from a directory.

    Args:
        grids_dir: Directory containing *.txt grid files.

    Returns:
        Mapping of file stem to Grid, in filename order.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    grids_dir = Path(grids_dir)

    if not grids_dir.exists():
        raise FileNotFoundError(f"Grids directory not found: {grids_dir}")

    if not grids_dir.is_dir():
        raise GridParseError(f"Path is not a directory: {grids_dir}")

    grids = {}
    for grid_file in sorted(grids_dir.glob("*.txt")):
        try:
            grids[grid_file.stem] = load_grid_file(grid_file)
        except (GridParseError, GridValidationError) as e:
            # Skip broken files but keep loading the rest
            logger.warning(f"Failed to load {grid_file}: {e}")

    return grids


def validate_grid_text(grid_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate grid text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_grid_text(grid_text)
        return True, None
    except (GridParseError, GridValidationError) as e:
        return False, str(e)
