"""
Board generation module.

Provides the no-guess board generator and a benchmark for measuring
how many layouts it needs per configuration.
"""
from .generator import (
    MAX_ATTEMPTS,
    BoardGenerator,
    GenerationResult,
    GeneratorConfig,
    compute_neighbor_counts,
    generate_guaranteed_board,
    place_mines,
)
from .benchmark import BenchmarkStats, GenerationBenchmark

__all__ = [
    "MAX_ATTEMPTS",
    "BoardGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "compute_neighbor_counts",
    "generate_guaranteed_board",
    "place_mines",
    "BenchmarkStats",
    "GenerationBenchmark",
]
