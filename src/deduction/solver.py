"""
Logical solver for minefield boards.

Decides whether a board can be cleared from a start cell using only
single-constraint deductions: each revealed number is compared with
its own neighbor set, never combined with other numbers.

Rules, for a revealed cell with count N, F flagged neighbors and U
hidden unflagged neighbors (U > 0):
    - N == F + U: every hidden unflagged neighbor is a mine
    - N == F:     every hidden unflagged neighbor is safe

A board the solver rejects may still be solvable with subset
reasoning. Generated boards are restricted to what these two rules can
clear.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List

import numpy as np

from minefield import Grid, Position, cascade


logger = logging.getLogger(__name__)


# ============================================================================
# Neighbor Analysis
# ============================================================================

@dataclass
class NeighborSummary:
    """Constraint view of one revealed numbered cell."""

    row: int
    col: int
    neighbor_count: int
    unknown: List[Position]
    flagged: int

    @property
    def implies_mines(self) -> bool:
        """All hidden unflagged neighbors must be mines."""
        return bool(self.unknown) and self.neighbor_count == self.flagged + len(self.unknown)

    @property
    def implies_safe(self) -> bool:
        """All hidden unflagged neighbors must be safe."""
        return bool(self.unknown) and self.neighbor_count == self.flagged


def summarize(
    grid: Grid,
    row: int,
    col: int,
    is_revealed: Callable[[int, int], bool],
    is_flagged: Callable[[int, int], bool],
) -> NeighborSummary:
    """
    Collect hidden unflagged neighbors and the flag count around a cell.

    The revealed/flagged predicates decide which view is inspected: the
    solver's shadow state or the real grid.
    """
    unknown = []
    flagged = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        if is_flagged(neighbor_row, neighbor_col):
            flagged += 1
        elif not is_revealed(neighbor_row, neighbor_col):
            unknown.append((neighbor_row, neighbor_col))
    return NeighborSummary(
        row=row,
        col=col,
        neighbor_count=grid.cell(row, col).neighbor_count,
        unknown=unknown,
        flagged=flagged,
    )


# ============================================================================
# Solver State
# ============================================================================

@dataclass
class SolverState:
    """
    Private working copy used during a solvability check.

    Arrays are indexed like the grid and never share storage with it.
    Flags here are deductions, not the player's flags.
    """

    revealed: np.ndarray
    flagged: np.ndarray
    passes: int = 0
    deductions: int = 0
    mines_found: List[Position] = field(default_factory=list)

    @classmethod
    def from_grid(cls, grid: Grid) -> "SolverState":
        """Copy reveal status from the grid, starting with no flags."""
        revealed = np.zeros((grid.rows, grid.cols), dtype=bool)
        for cell in grid:
            revealed[cell.row, cell.col] = cell.is_revealed
        flagged = np.zeros((grid.rows, grid.cols), dtype=bool)
        return cls(revealed=revealed, flagged=flagged)

    def reveal(self, grid: Grid, row: int, col: int) -> int:
        """Open a cell in the shadow state, cascading through zero counts."""

        def open_cell(r: int, c: int) -> None:
            self.revealed[r, c] = True

        return cascade(
            grid.rows,
            grid.cols,
            row,
            col,
            can_open=lambda r, c: not self.revealed[r, c],
            open_cell=open_cell,
            is_empty=lambda r, c: grid.cell(r, c).neighbor_count == 0,
        )

    def flag(self, row: int, col: int) -> None:
        self.flagged[row, col] = True
        self.mines_found.append((row, col))

    def summarize(self, grid: Grid, row: int, col: int) -> NeighborSummary:
        return summarize(
            grid,
            row,
            col,
            is_revealed=lambda r, c: bool(self.revealed[r, c]),
            is_flagged=lambda r, c: bool(self.flagged[r, c]),
        )

    def covers_safe_cells(self, grid: Grid) -> bool:
        """True when every non-mine cell of the grid is revealed here."""
        return all(self.revealed[cell.row, cell.col] for cell in grid if not cell.is_mine)


# ============================================================================
# Solving
# ============================================================================

def _run_pass(grid: Grid, state: SolverState) -> bool:
    """Scan every revealed numbered cell once. Returns True on progress."""
    progress = False
    for cell in grid:
        if not state.revealed[cell.row, cell.col] or cell.neighbor_count == 0:
            continue

        summary = state.summarize(grid, cell.row, cell.col)

        if summary.implies_mines:
            for row, col in summary.unknown:
                state.flag(row, col)
            state.deductions += 1
            progress = True
        elif summary.implies_safe:
            for row, col in summary.unknown:
                state.reveal(grid, row, col)
            state.deductions += 1
            progress = True
    return progress


def solve(grid: Grid, start_row: int, start_col: int) -> SolverState:
    """
    Run single-constraint deduction to a fixed point.

    The grid is only read. A fresh shadow state is built from its reveal
    status, expanded from the start cell, then both rules are applied
    pass after pass until a full pass deduces nothing.

    Args:
        grid: Board with mines and neighbor counts in place.
        start_row: Row of the first reveal.
        start_col: Column of the first reveal.

    Returns:
        The final shadow state.
    """
    state = SolverState.from_grid(grid)
    state.reveal(grid, start_row, start_col)

    progress = True
    while progress:
        progress = _run_pass(grid, state)
        state.passes += 1

    return state


def is_solvable(grid: Grid, start_row: int, start_col: int) -> bool:
    """
    Check whether the board clears from the start cell without guessing.

    Only non-mine cells are checked; mines never need to be flagged.
    """
    state = solve(grid, start_row, start_col)
    solvable = state.covers_safe_cells(grid)
    logger.debug(
        "Solver finished after %d passes, %d deductions, solvable=%s",
        state.passes,
        state.deductions,
        solvable,
    )
    return solvable
