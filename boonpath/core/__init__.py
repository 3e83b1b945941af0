# Core module
from .grid import CellValue, Coordinate, Direction, Grid, SearchState, NEIGHBOR_ORDER
from .result import PathResult
from .pathfinder import find_path
from .replay import ReplayFrame, SearchReplay
from .generator import GeneratedMaze, generate_solvable_grid, random_grid
from .grid_parser import (
    GridParseError,
    GridValidationError,
    parse_grid_text,
    validate_matrix,
    load_grid_file,
    load_all_grids,
    validate_grid_text,
)

__all__ = [
    "CellValue",
    "Coordinate",
    "Direction",
    "Grid",
    "SearchState",
    "NEIGHBOR_ORDER",
    "PathResult",
    "find_path",
    "ReplayFrame",
    "SearchReplay",
    "GeneratedMaze",
    "generate_solvable_grid",
    "random_grid",
    "GridParseError",
    "GridValidationError",
    "parse_grid_text",
    "validate_matrix",
    "load_grid_file",
    "load_all_grids",
    "validate_grid_text",
]
