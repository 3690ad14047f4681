"""
Minefield module.

Provides the grid model, the 8-neighbor topology, the reveal
propagator and board configuration presets.
"""
from .cell import Cell, CellState, HintKind, HintMark
from .grid import Grid, Position, create_empty_grid, neighbors_of
from .reveal import cascade, flood_fill
from .config import (
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    ADVANCED,
    DIFFICULTIES,
    SAFE_ZONE_CELLS,
)
from .utils import setup_logger

__all__ = [
    "Cell",
    "CellState",
    "HintKind",
    "HintMark",
    "Grid",
    "Position",
    "create_empty_grid",
    "neighbors_of",
    "cascade",
    "flood_fill",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "ADVANCED",
    "DIFFICULTIES",
    "SAFE_ZONE_CELLS",
    "setup_logger",
]
