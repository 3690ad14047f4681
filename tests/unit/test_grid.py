"""
Unit tests for Grid and the neighbor topology.
"""
import numpy as np
import pytest
from minefield import Grid, HintKind, HintMark, create_empty_grid, neighbors_of


# ============================================================================
# Grid Creation Tests
# ============================================================================

class TestCreateEmptyGrid:
    """Test empty grid allocation."""

    def test_dimensions(self) -> None:
        """Grid keeps the requested dimensions."""
        grid = create_empty_grid(4, 7)
        assert grid.rows == 4
        assert grid.cols == 7
        assert grid.size == 28
        assert len(list(grid)) == 28

    def test_all_cells_default(self) -> None:
        """Every cell starts with default values."""
        grid = create_empty_grid(3, 4)
        for cell in grid:
            assert cell.is_mine is False
            assert cell.is_hidden is True
            assert cell.is_flagged is False
            assert cell.neighbor_count == 0

    def test_cells_know_their_coordinates(self) -> None:
        """Each cell carries its own (row, col)."""
        grid = create_empty_grid(3, 4)
        for row in range(3):
            for col in range(4):
                assert grid.cell(row, col).position == (row, col)

    def test_iteration_is_row_major(self) -> None:
        """Cells iterate row by row."""
        grid = create_empty_grid(2, 3)
        positions = [cell.position for cell in grid]
        assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_get_cell_out_of_bounds_is_none(self, empty_grid: Grid) -> None:
        """Out-of-range lookups return None instead of failing."""
        assert empty_grid.get_cell(-1, 0) is None
        assert empty_grid.get_cell(0, 3) is None
        assert empty_grid.get_cell(1, 1) is empty_grid.cell(1, 1)


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test the 8-neighbor topology."""

    @pytest.mark.parametrize(
        "row, col, expected",
        [
            (0, 0, 3),
            (0, 1, 5),
            (1, 1, 8),
            (2, 2, 3),
        ],
    )
    def test_neighbor_counts(self, row: int, col: int, expected: int) -> None:
        """Corners have 3 neighbors, edges 5, interior 8."""
        assert len(neighbors_of(row, col, 3, 3)) == expected

    def test_excludes_center(self) -> None:
        """A cell is never its own neighbor."""
        assert (1, 1) not in neighbors_of(1, 1, 3, 3)

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        """1x1 grid has no neighbors."""
        assert neighbors_of(0, 0, 1, 1) == []

    def test_order_is_stable(self) -> None:
        """Row offset first, then column offset."""
        assert neighbors_of(1, 1, 3, 3) == [
            (0, 0), (0, 1), (0, 2),
            (1, 0), (1, 2),
            (2, 0), (2, 1), (2, 2),
        ]

    def test_grid_neighbors_match_function(self, empty_grid: Grid) -> None:
        """Grid.neighbors delegates to neighbors_of."""
        assert empty_grid.neighbors(0, 2) == neighbors_of(0, 2, 3, 3)


# ============================================================================
# Query and View Tests
# ============================================================================

class TestGridViews:
    """Test counters, copies and renderings."""

    def test_counters(self, corner_mine_grid: Grid) -> None:
        """Mine, revealed and flag counters follow the cells."""
        corner_mine_grid.cell(0, 0).reveal()
        corner_mine_grid.cell(2, 2).toggle_flag()
        assert corner_mine_grid.mine_count() == 1
        assert corner_mine_grid.mine_positions() == [(2, 2)]
        assert corner_mine_grid.revealed_count() == 1
        assert corner_mine_grid.flag_count() == 1

    def test_copy_is_independent(self, corner_mine_grid: Grid) -> None:
        """Copies share no cells with the original."""
        clone = corner_mine_grid.copy()
        clone.cell(0, 0).reveal()
        assert corner_mine_grid.cell(0, 0).is_hidden is True
        assert clone.mine_positions() == corner_mine_grid.mine_positions()

    def test_observation_shape_and_dtype(self, empty_grid: Grid) -> None:
        """Observation is an int8 array matching the grid."""
        obs = empty_grid.to_observation()
        assert obs.shape == (3, 3)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)

    def test_render(self, corner_mine_grid: Grid) -> None:
        """Rendering draws counts, blanks, flags and hidden cells."""
        corner_mine_grid.cell(0, 0).reveal()
        corner_mine_grid.cell(1, 1).reveal()
        corner_mine_grid.cell(2, 2).toggle_flag()
        assert corner_mine_grid.render() == "  . . \n. 1 . \n. . F "

    def test_render_shows_hints_and_mines(self, corner_mine_grid: Grid) -> None:
        """Active hints draw as S/M and show_mines exposes hidden mines."""
        corner_mine_grid.cell(0, 0).hint = HintMark(kind=HintKind.SAFE)
        lines = corner_mine_grid.render(show_mines=True).split("\n")
        assert lines[0].startswith("S")
        assert lines[2].endswith("* ")

    def test_clear_hints(self, empty_grid: Grid) -> None:
        """clear_hints removes every highlight."""
        empty_grid.cell(1, 1).hint = HintMark(kind=HintKind.MINE)
        empty_grid.clear_hints()
        assert all(cell.hint is None for cell in empty_grid)
