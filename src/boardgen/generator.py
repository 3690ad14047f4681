"""
Board generator producing no-guess boards.

Places mines at random away from the first reveal, computes neighbor
counts, and keeps the first layout the logical solver can clear.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from minefield import Grid, Position, create_empty_grid
from deduction import is_solvable


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 500


# ============================================================================
# Generator Configuration
# ============================================================================

@dataclass
class GeneratorConfig:
    """
    Configuration for the board generator.

    Attributes:
        max_attempts: Layouts tried before falling back to an empty board.
        seed: Seed for the generator's random source (None for entropy).
    """

    max_attempts: int = MAX_ATTEMPTS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    grid: Grid
    attempts: int
    fallback: bool = False


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def _near_start(row: int, col: int, start_row: int, start_col: int) -> bool:
    """Chebyshev distance of at most 1 from the start cell."""
    return abs(row - start_row) <= 1 and abs(col - start_col) <= 1


def _get_valid_mine_positions(
    grid: Grid, start_row: int, start_col: int
) -> List[Position]:
    """All positions outside the 3x3 block around the start cell."""
    positions = []
    for row in range(grid.rows):
        for col in range(grid.cols):
            if not _near_start(row, col, start_row, start_col):
                positions.append((row, col))
    return positions


def place_mines(
    grid: Grid,
    mine_count: int,
    start_row: int,
    start_col: int,
    rng: random.Random,
) -> None:
    """
    Place mines uniformly at random, keeping the start block clear.

    Raises:
        ValueError: If fewer positions are available than mines requested.
    """
    positions = _get_valid_mine_positions(grid, start_row, start_col)
    for row, col in rng.sample(positions, mine_count):
        grid.cell(row, col).is_mine = True


def compute_neighbor_counts(grid: Grid) -> None:
    """Calculate neighbor mine counts for all non-mine cells."""
    for cell in grid:
        if cell.is_mine:
            continue
        cell.neighbor_count = sum(
            1 for row, col in grid.neighbors(cell.row, cell.col)
            if grid.cell(row, col).is_mine
        )


# ============================================================================
# Board Generator
# ============================================================================

class BoardGenerator:
    """
    Generates boards that clear from the start cell by pure logic.

    Each attempt builds a fresh grid, so attempts share no state. When
    the attempt budget runs out the result is an empty grid flagged as
    a fallback: a valid, trivially solvable board rather than an error.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            config: Generator configuration.
            rng: Random source; built from ``config.seed`` when omitted.
        """
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)

    def generate(
        self,
        rows: int,
        cols: int,
        mine_count: int,
        start_row: int,
        start_col: int,
    ) -> GenerationResult:
        """
        Generate a board solvable from (start_row, start_col).

        Returns:
            Result holding the grid, attempts used and whether the empty
            fallback was returned.
        """
        for attempt in range(1, self.config.max_attempts + 1):
            grid = self._build_candidate(rows, cols, mine_count, start_row, start_col)
            if is_solvable(grid, start_row, start_col):
                logger.debug(
                    "Generated %dx%d board with %d mines in %d attempt(s)",
                    rows, cols, mine_count, attempt,
                )
                return GenerationResult(grid=grid, attempts=attempt)
            logger.debug("Attempt %d rejected by solver", attempt)

        logger.warning(
            "No solvable %dx%d board with %d mines after %d attempts, "
            "returning empty board",
            rows, cols, mine_count, self.config.max_attempts,
        )
        return GenerationResult(
            grid=create_empty_grid(rows, cols),
            attempts=self.config.max_attempts,
            fallback=True,
        )

    def _build_candidate(
        self,
        rows: int,
        cols: int,
        mine_count: int,
        start_row: int,
        start_col: int,
    ) -> Grid:
        grid = create_empty_grid(rows, cols)
        place_mines(grid, mine_count, start_row, start_col, self.rng)
        compute_neighbor_counts(grid)
        return grid


def generate_guaranteed_board(
    rows: int,
    cols: int,
    mine_count: int,
    start_row: int,
    start_col: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Grid:
    """
    Produce a fair board that clears from the start cell without guessing.

    No mine lies within one cell of the start. If no such board is found
    within ``max_attempts`` layouts, an empty board is returned instead.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Mines to place.
        start_row: Row of the first reveal.
        start_col: Column of the first reveal.
        rng: Random source; pass a seeded ``random.Random`` to reproduce
            a board.
        max_attempts: Layouts tried before the empty fallback.

    Returns:
        Grid with mines and neighbor counts set, all cells hidden.
    """
    generator = BoardGenerator(GeneratorConfig(max_attempts=max_attempts), rng=rng)
    return generator.generate(rows, cols, mine_count, start_row, start_col).grid
