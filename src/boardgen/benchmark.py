"""
Generation benchmark.

Runs the board generator repeatedly for one configuration and
summarizes how hard no-guess layouts are to find.
"""
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from minefield import BoardConfig

from .generator import BoardGenerator, GeneratorConfig


@dataclass
class BenchmarkStats:
    """Accumulated generation statistics."""

    runs: int = 0
    fallbacks: int = 0
    attempts: List[int] = field(default_factory=list)
    durations: List[float] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        if not self.runs:
            return 0.0
        return (self.runs - self.fallbacks) / self.runs

    @property
    def mean_attempts(self) -> float:
        if not self.attempts:
            return 0.0
        return float(np.mean(self.attempts))

    @property
    def max_attempts(self) -> int:
        return max(self.attempts, default=0)

    @property
    def mean_seconds(self) -> float:
        if not self.durations:
            return 0.0
        return float(np.mean(self.durations))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "runs": self.runs,
            "fallbacks": self.fallbacks,
            "success_rate": self.success_rate,
            "mean_attempts": self.mean_attempts,
            "max_attempts": self.max_attempts,
            "mean_seconds": self.mean_seconds,
        }


class GenerationBenchmark:
    """
    Measure generator behaviour for a board configuration.

    The start cell defaults to the board centre, or can be fixed.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        generator_config: Optional[GeneratorConfig] = None,
        num_runs: int = 20,
    ) -> None:
        self.board_config = board_config or BoardConfig()
        self.generator = BoardGenerator(generator_config)
        self.num_runs = num_runs

    def _default_start(self) -> Tuple[int, int]:
        return self.board_config.rows // 2, self.board_config.cols // 2

    def run(self, start: Optional[Tuple[int, int]] = None) -> BenchmarkStats:
        """
        Generate ``num_runs`` boards and collect statistics.

        Args:
            start: (row, col) of the first reveal.

        Returns:
            Collected statistics.
        """
        start_row, start_col = start or self._default_start()
        stats = BenchmarkStats()

        for _ in range(self.num_runs):
            began = time.perf_counter()
            result = self.generator.generate(
                self.board_config.rows,
                self.board_config.cols,
                self.board_config.num_mines,
                start_row,
                start_col,
            )
            stats.durations.append(time.perf_counter() - began)
            stats.runs += 1
            stats.attempts.append(result.attempts)
            if result.fallback:
                stats.fallbacks += 1

        return stats

    def compare(
        self, configs: Dict[str, BoardConfig]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Benchmark several configurations.

        Args:
            configs: Dictionary of name -> board configuration.

        Returns:
            Dictionary of name -> statistics dictionary.
        """
        results = {}
        original = self.board_config
        for name, config in configs.items():
            print(f"Benchmarking {name}...")
            self.board_config = config
            results[name] = self.run().to_dict()
        self.board_config = original
        return results
