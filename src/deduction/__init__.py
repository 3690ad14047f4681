"""
Deduction module.

Single-constraint logical solver used to validate generated boards
and to produce in-game hints.
"""
from .solver import NeighborSummary, SolverState, is_solvable, solve, summarize
from .hints import Hint, apply_hint, find_hint

__all__ = [
    "NeighborSummary",
    "SolverState",
    "is_solvable",
    "solve",
    "summarize",
    "Hint",
    "apply_hint",
    "find_hint",
]
