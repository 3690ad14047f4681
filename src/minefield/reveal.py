"""
Reveal propagator for the minefield.

Opens a cell and, when it has no neighboring mines, cascades through
the connected zero-count region plus its one-cell numbered border.
"""
from typing import Callable

from .grid import Grid, neighbors_of


# ============================================================================
# Cascade Expansion
# ============================================================================

def cascade(
    rows: int,
    cols: int,
    row: int,
    col: int,
    can_open: Callable[[int, int], bool],
    open_cell: Callable[[int, int], None],
    is_empty: Callable[[int, int], bool],
) -> int:
    """
    Expand a reveal from (row, col) using an explicit stack.

    Every popped position passes through the same guard: out of bounds
    or ``can_open`` returning False makes it a no-op. Opened cells that
    are empty push all 8 neighbors.

    Args:
        rows: Number of rows in the grid.
        cols: Number of columns in the grid.
        row: Start row.
        col: Start column.
        can_open: Whether an in-bounds position may be opened.
        open_cell: Marks a position as opened.
        is_empty: Whether a position has zero neighboring mines.

    Returns:
        Number of positions opened.
    """
    opened = 0
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        if not (0 <= current_row < rows and 0 <= current_col < cols):
            continue
        if not can_open(current_row, current_col):
            continue
        open_cell(current_row, current_col)
        opened += 1
        if is_empty(current_row, current_col):
            stack.extend(neighbors_of(current_row, current_col, rows, cols))
    return opened


# ============================================================================
# Flood Fill
# ============================================================================

def flood_fill(grid: Grid, row: int, col: int) -> None:
    """
    Reveal a cell and cascade through its zero-count region.

    No-op when the position is out of bounds, already revealed or
    flagged. Flagged cells are never opened by the cascade either.
    Mines are not guarded against explicitly: zero-count cells never
    touch a mine, so a cascade can only reach one if the caller reveals
    it directly.
    """
    cascade(
        grid.rows,
        grid.cols,
        row,
        col,
        can_open=lambda r, c: grid.cell(r, c).is_hidden,
        open_cell=lambda r, c: grid.cell(r, c).reveal(),
        is_empty=lambda r, c: grid.cell(r, c).neighbor_count == 0,
    )
