"""
Grid module for the minefield.

Implements the rectangular board of cells and the 8-neighbor
topology shared by the reveal propagator, the solver and the
board generator.
"""
import copy
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, HintKind


Position = Tuple[int, int]


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def neighbors_of(row: int, col: int, rows: int, cols: int) -> List[Position]:
    """
    Get valid neighboring cell positions (Moore neighborhood).

    Order is stable: row offset -1..1, then column offset -1..1.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        rows: Number of rows in the grid.
        cols: Number of columns in the grid.

    Returns:
        List of (row, col) tuples for in-bounds neighbors.
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                neighbors.append((new_row, new_col))
    return neighbors


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Fixed-size rectangular collection of cells.

    Dimensions never change for the lifetime of a grid; a new grid is
    created for every game.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(row=row, col=col) for col in range(cols)]
            for row in range(rows)
        ]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over cells in row-major order."""
        for line in self._cells:
            yield from line

    # ========================================================================
    # Cell Access
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        """Get cell at an in-bounds position."""
        return self._cells[row][col]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        return neighbors_of(row, col, self.rows, self.cols)

    # ========================================================================
    # Board Queries
    # ========================================================================

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def mine_positions(self) -> List[Position]:
        """Positions of all mines in row-major order."""
        return [cell.position for cell in self if cell.is_mine]

    def mine_count(self) -> int:
        return sum(1 for cell in self if cell.is_mine)

    def revealed_count(self) -> int:
        return sum(1 for cell in self if cell.is_revealed)

    def flag_count(self) -> int:
        return sum(1 for cell in self if cell.is_flagged)

    def clear_hints(self) -> None:
        """Drop every hint highlight from the grid."""
        for cell in self:
            cell.hint = None

    def copy(self) -> "Grid":
        """Deep copy, for handing the board over by value."""
        return copy.deepcopy(self)

    # ========================================================================
    # Views
    # ========================================================================

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self:
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def render(self, show_mines: bool = False) -> str:
        """
        Render grid as ASCII string.

        Hidden cells are ``.``, flags ``F``, revealed mines ``*``, empty
        revealed cells a blank. Active hints show as ``S`` (safe) or
        ``M`` (mine). With ``show_mines`` every hidden mine is drawn as
        ``*`` as well.
        """
        lines = []
        obs = self.to_observation()

        for row in range(self.rows):
            row_str = ""
            for col in range(self.cols):
                cell = self._cells[row][col]
                val = obs[row, col]
                if cell.hint is not None and cell.hint.active:
                    row_str += "M" if cell.hint.kind == HintKind.MINE else "S"
                elif show_mines and cell.is_mine and cell.state == CellState.HIDDEN:
                    row_str += "*"
                elif val == -1:
                    row_str += "."
                elif val == -2:
                    row_str += "F"
                elif val == 9:
                    row_str += "*"
                elif val == 0:
                    row_str += " "
                else:
                    row_str += str(val)
                row_str += " "
            lines.append(row_str)

        return "\n".join(lines)


def create_empty_grid(rows: int, cols: int) -> Grid:
    """Allocate a grid of default cells: no mines, all hidden, no counts."""
    return Grid(rows, cols)
