"""
Hint finder for boards in play.

Applies the solver's two single-constraint rules to the real grid,
using the player's actual reveals and flags, and reports the first
move they prove.
"""
from dataclasses import dataclass
from typing import Optional

from minefield import Grid, HintKind, HintMark

from .solver import summarize


@dataclass(frozen=True)
class Hint:
    """A single deducible move."""

    row: int
    col: int
    kind: HintKind

    @property
    def is_mine(self) -> bool:
        return self.kind == HintKind.MINE

    def describe(self) -> str:
        if self.kind == HintKind.MINE:
            return f"({self.row}, {self.col}) must be a mine - flag it"
        return f"({self.row}, {self.col}) is safe to reveal"


def find_hint(grid: Grid) -> Optional[Hint]:
    """
    Find the first single-constraint deduction on the board.

    Revealed numbered cells are scanned in row-major order. At each one
    the mine rule is tried before the safe rule, and the first hidden
    unflagged neighbor is reported.

    Returns:
        The hint, or None when no single-constraint deduction exists.
        None is the normal signal for the caller to use some other hint
        source.
    """
    for cell in grid:
        if not cell.is_revealed or cell.neighbor_count == 0:
            continue

        summary = summarize(
            grid,
            cell.row,
            cell.col,
            is_revealed=lambda r, c: grid.cell(r, c).is_revealed,
            is_flagged=lambda r, c: grid.cell(r, c).is_flagged,
        )
        if not summary.unknown:
            continue

        row, col = summary.unknown[0]
        if summary.implies_mines:
            return Hint(row, col, HintKind.MINE)
        if summary.implies_safe:
            return Hint(row, col, HintKind.SAFE)

    return None


def apply_hint(grid: Grid, hint: Hint) -> None:
    """Highlight the hinted cell, replacing any earlier highlight."""
    grid.clear_hints()
    grid.cell(hint.row, hint.col).hint = HintMark(active=True, kind=hint.kind)
