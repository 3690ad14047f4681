"""
Game session for a no-guess minefield.

Drives one game the way an interface would: the first reveal generates
a guaranteed board around the clicked cell, later reveals flood fill,
flags are toggled by the player, and hints come from the logical
solver.
"""
import logging
from enum import Enum, auto
from typing import Optional

from minefield import BoardConfig, Grid, create_empty_grid, flood_fill
from deduction import Hint, apply_hint, find_hint
from boardgen import BoardGenerator


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IDLE = auto()
    GENERATING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One game on a fixed board configuration.

    The grid stays empty (no mines) until the first reveal. Call
    ``reset`` to start a new game; a new grid is created every time.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        generator: Optional[BoardGenerator] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self.generator = generator or BoardGenerator()
        self.reset()

    def reset(self) -> None:
        """Reset to an empty, idle board."""
        self.grid: Grid = create_empty_grid(self.config.rows, self.config.cols)
        self.status = GameStatus.IDLE
        self.flags = 0
        self.fallback = False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    @property
    def mines_remaining(self) -> int:
        """Mines left to flag, as shown on a counter."""
        return self.config.num_mines - self.flags

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        The first reveal generates the board with this cell as the safe
        start. Revealing a mine loses the game.

        Returns:
            True if the action was applied, False if it was ignored.
        """
        if self.is_over or not self.grid.in_bounds(row, col):
            return False
        if self.grid.cell(row, col).is_flagged:
            return False

        self.grid.clear_hints()

        if self.status == GameStatus.IDLE:
            self._start(row, col)
            return True

        cell = self.grid.cell(row, col)
        if cell.is_revealed:
            return False

        if cell.is_mine:
            cell.reveal()
            self.status = GameStatus.LOST
            logger.info("Mine revealed at (%d, %d)", row, col)
            return True

        flood_fill(self.grid, row, col)
        self._check_win()
        return True

    def _start(self, row: int, col: int) -> None:
        """Generate the board around the first reveal."""
        self.status = GameStatus.GENERATING
        result = self.generator.generate(
            self.config.rows,
            self.config.cols,
            self.config.num_mines,
            row,
            col,
        )
        self.grid = result.grid
        self.fallback = result.fallback
        self.flags = 0
        flood_fill(self.grid, row, col)
        self.status = GameStatus.PLAYING
        self._check_win()

    def _check_win(self) -> None:
        """Won when every non-mine cell is revealed."""
        safe_cells = self.grid.size - self.grid.mine_count()
        if self.grid.revealed_count() == safe_cells:
            self.status = GameStatus.WON

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.status not in (GameStatus.IDLE, GameStatus.PLAYING):
            return False
        cell = self.grid.get_cell(row, col)
        if cell is None or not cell.toggle_flag():
            return False

        self.grid.clear_hints()
        self.flags += 1 if cell.is_flagged else -1
        return True

    def hint(self) -> Optional[Hint]:
        """
        Find and highlight the next logical move.

        Returns:
            The hint, or None when the solver cannot deduce anything. The
            caller decides what to do then (for example ask another hint
            source).
        """
        if self.status != GameStatus.PLAYING:
            return None
        found = find_hint(self.grid)
        if found is None:
            self.grid.clear_hints()
            return None
        apply_hint(self.grid, found)
        return found
