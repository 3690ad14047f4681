"""
Cell module for the minefield grid.

Represents individual cells on the board with their state
(hidden/revealed/flagged), content (mine/number) and an optional
hint highlight used by the interface layer.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class HintKind(Enum):
    """What a logical hint says about a cell."""

    SAFE = auto()
    MINE = auto()


@dataclass
class HintMark:
    """Transient highlight placed on a hinted cell. Never read by the solver."""

    active: bool = True
    kind: HintKind = HintKind.SAFE


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    A single ``state`` field is kept instead of separate revealed and
    flagged booleans, so a cell can never be both at once.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        neighbor_count: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        hint: Highlight set by the hint finder, if any.
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    neighbor_count: int = 0
    state: CellState = CellState.HIDDEN
    hint: Optional[HintMark] = None

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def position(self):
        return self.row, self.col

    def to_observation(self) -> int:
        """
        Convert cell to its observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_count
