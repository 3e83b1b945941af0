"""Tests for the augmented BFS pathfinder."""

import random

import pytest

from boonpath.core import Grid, PathResult, find_path, random_grid

from .conftest import DETOUR_GRID, WALL_ROW_GRID


def assert_valid_path(grid: Grid, path: list) -> None:
    """Path starts at start, ends at goal and moves one cell at a time."""
    assert path[0] == grid.start
    assert path[-1] == grid.goal
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
        assert grid.in_bounds((r2, c2))


class TestEdgeCases:
    """Tests for degenerate grids."""

    def test_empty_grid(self):
        """Test grid = [] returns empty path and empty trace."""
        result = find_path([], can_break_wall=False)
        assert result.path == []
        assert result.visited == []

    def test_zero_column_grid(self):
        """Test a grid with rows but no columns."""
        result = find_path([[]], can_break_wall=True)
        assert result.path == []
        assert result.visited == []

    def test_single_cell(self):
        """Test [[Free]] yields a one-element path and trace."""
        result = find_path([[0]], can_break_wall=False)
        assert result.path == [(0, 0)]
        assert result.visited == [(0, 0)]
        assert result.steps == 0

    def test_accepts_grid_instance(self):
        """Test that a Grid object is accepted as well as a matrix."""
        grid = Grid.from_matrix([[0, 0], [0, 0]])
        assert find_path(grid).path == find_path([[0, 0], [0, 0]]).path

    def test_returns_path_result(self):
        """Test return type."""
        assert isinstance(find_path([[0]]), PathResult)


class TestSearchOrder:
    """Tests pinning the exact discovery order."""

    def test_open_2x2(self):
        """Test east-before-south tie breaking on an open 2x2 grid."""
        result = find_path([[0, 0], [0, 0]], can_break_wall=False)
        assert result.path == [(0, 0), (0, 1), (1, 1)]
        assert result.visited == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_unreachable_without_boon(self):
        """Test a separating wall row blocks the search."""
        result = find_path(WALL_ROW_GRID, can_break_wall=False)
        assert result.path == []
        assert result.visited == [(0, 0), (0, 1), (0, 2)]

    def test_boon_unlocks_path(self):
        """Test the same wall row is crossed by breaking exactly one wall."""
        result = find_path(WALL_ROW_GRID, can_break_wall=True)
        assert result.path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
        assert result.broken_wall(Grid.from_matrix(WALL_ROW_GRID)) == (1, 2)

    def test_boon_trace_revisits_coordinates_in_second_layer(self):
        """Test that a coordinate is explored again once a wall is broken."""
        result = find_path(WALL_ROW_GRID, can_break_wall=True)
        assert result.visited == [
            (0, 0), (0, 1), (1, 0), (0, 2), (1, 1), (2, 0),
            (0, 0), (1, 2), (2, 1), (0, 1), (2, 2),
        ]

    def test_wall_on_goal_needs_boon(self):
        """Test a walled goal is only reachable by breaking it."""
        assert find_path([[0, 1]], can_break_wall=False).path == []
        result = find_path([[0, 1]], can_break_wall=True)
        assert result.path == [(0, 0), (0, 1)]
        assert result.broken_wall(Grid.from_matrix([[0, 1]])) == (0, 1)

    def test_two_walls_in_a_row_stay_blocked(self):
        """Test that only one wall can be broken."""
        grid = [
            [0, 0, 0],
            [1, 1, 1],
            [1, 1, 1],
            [0, 0, 0],
        ]
        result = find_path(grid, can_break_wall=True)
        assert result.path == []
        assert len(result.visited) > 0


class TestProperties:
    """Property checks over fixed and random grids."""

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 5), (4, 1), (3, 3), (6, 9)])
    def test_open_field_distance(self, rows, cols):
        """Test path length equals Manhattan distance with no walls."""
        result = find_path(Grid.empty(rows, cols), can_break_wall=False)
        assert len(result.path) - 1 == (rows - 1) + (cols - 1)

    def test_unreachable_covers_start_partition(self):
        """Test a failed search explores every cell it can reach."""
        result = find_path(WALL_ROW_GRID, can_break_wall=False)
        assert set(result.visited) == {(0, 0), (0, 1), (0, 2)}

    def test_boon_shortens_detour(self):
        """Test breaking a wall skips a long detour."""
        without_boon = find_path(DETOUR_GRID, can_break_wall=False)
        with_boon = find_path(DETOUR_GRID, can_break_wall=True)

        assert without_boon.steps == 10
        assert with_boon.steps == 6
        assert len(with_boon.broken_walls(Grid.from_matrix(DETOUR_GRID))) == 1

    def test_visited_starts_at_start_and_ends_at_goal(self):
        """Test trace bounds on a successful search."""
        grid = Grid.from_matrix(DETOUR_GRID)
        for can_break_wall in (False, True):
            result = find_path(grid, can_break_wall)
            assert result.visited[0] == (0, 0)
            assert result.visited[-1] == grid.goal

    def test_determinism(self):
        """Test repeated calls give identical path and trace."""
        grid = random_grid(8, 12, 0.3, random.Random(7))
        for can_break_wall in (False, True):
            first = find_path(grid, can_break_wall)
            second = find_path(grid, can_break_wall)
            assert first.path == second.path
            assert first.visited == second.visited

    @pytest.mark.parametrize("seed", range(40))
    def test_random_grid_invariants(self, seed):
        """Test monotonic benefit, single-break bound and path validity."""
        grid = random_grid(7, 9, 0.35, random.Random(seed))
        without_boon = find_path(grid, can_break_wall=False)
        with_boon = find_path(grid, can_break_wall=True)

        assert with_boon.visited[0] == (0, 0)
        assert without_boon.visited[0] == (0, 0)

        if without_boon.found:
            assert_valid_path(grid, without_boon.path)
            assert without_boon.broken_walls(grid) == []
            # Enabling the boon only adds edges
            assert with_boon.found
            assert with_boon.steps <= without_boon.steps

        if with_boon.found:
            assert_valid_path(grid, with_boon.path)
            assert len(with_boon.broken_walls(grid)) <= 1
            assert with_boon.visited[-1] == grid.goal


class TestPathResult:
    """Tests for the result container."""

    def test_not_found_has_no_steps(self):
        """Test steps is None for an empty path."""
        result = PathResult(path=[], visited=[(0, 0)])
        assert result.found is False
        assert result.steps is None

    def test_to_dict_with_grid(self):
        """Test serialization including the broken wall."""
        grid = Grid.from_matrix([[0, 1]])
        data = find_path(grid, can_break_wall=True).to_dict(grid)
        assert data == {
            "path": [[0, 0], [0, 1]],
            "visited": [[0, 0], [0, 1]],
            "found": True,
            "steps": 1,
            "broken_wall": [0, 1],
        }

    def test_to_dict_without_grid(self):
        """Test broken_wall is omitted without a grid."""
        assert "broken_wall" not in PathResult.empty().to_dict()

    def test_wall_on_start_is_not_broken(self):
        """Test a wall under the start cell is not reported as broken."""
        grid = Grid.from_matrix([[1, 0], [0, 0]])
        result = find_path(grid, can_break_wall=False)
        assert result.path == [(0, 0), (0, 1), (1, 1)]
        assert result.broken_walls(grid) == []
        assert result.broken_wall(grid) is None

    def test_wall_on_start_counts_only_crossed_wall(self):
        """Test only the wall moved onto is reported when the start is walled."""
        grid = Grid.from_matrix([[1, 1], [1, 0]])
        result = find_path(grid, can_break_wall=True)
        assert result.path == [(0, 0), (0, 1), (1, 1)]
        assert result.broken_walls(grid) == [(0, 1)]
