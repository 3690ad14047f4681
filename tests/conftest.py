"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, Cell, Grid, create_empty_grid
from boardgen import BoardGenerator, GeneratorConfig, compute_neighbor_counts


# ============================================================================
# Layouts
# ============================================================================

# Two stacked mines form a wall; the column behind it is only reachable
# by flagging the wall and walking around the bottom row.
WALL_LAYOUT = [
    "..*.",
    "..*.",
    "....",
]

# One mine splits a single row; cells past it can never be reached.
SPLIT_ROW_LAYOUT = ["..*.."]


def grid_from_layout(layout: List[str]) -> Grid:
    """Build a grid from rows of '*' (mine) and '.' (safe), counts filled in."""
    grid = create_empty_grid(len(layout), len(layout[0]))
    for row, line in enumerate(layout):
        for col, char in enumerate(line):
            grid.cell(row, col).is_mine = char == "*"
    compute_neighbor_counts(grid)
    return grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def make_grid() -> Callable[[List[str]], Grid]:
    """Factory building grids from text layouts."""
    return grid_from_layout


@pytest.fixture
def empty_grid() -> Grid:
    """Create a 3x3 grid with no mines."""
    return create_empty_grid(3, 3)


@pytest.fixture
def wall_grid() -> Grid:
    """Grid that needs both deduction rules to clear from (0, 0)."""
    return grid_from_layout(WALL_LAYOUT)


@pytest.fixture
def split_row_grid() -> Grid:
    """Single-row grid that cannot be cleared from (0, 0)."""
    return grid_from_layout(SPLIT_ROW_LAYOUT)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """Create a 3x3 grid with one mine in the bottom-right corner."""
    return grid_from_layout(["...", "...", "..*"])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_count=3)
    cell.reveal()
    return cell


# ============================================================================
# Generator Fixtures
# ============================================================================

@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def seeded_generator() -> BoardGenerator:
    """Generator with a fixed seed."""
    return BoardGenerator(GeneratorConfig(seed=42))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small board for quick game tests."""
    return BoardConfig(5, 5, 3)
