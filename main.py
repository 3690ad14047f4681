#!/usr/bin/env python3
"""
No-guess minefield - Main entry point.

Usage:
    python main.py generate [--difficulty NAME] [--start ROW COL] [--seed N]
    python main.py hint [--difficulty NAME] [--start ROW COL] [--seed N]
    python main.py benchmark [--runs N] [--difficulty NAME | --all]
"""
import argparse
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig, DIFFICULTIES, flood_fill, setup_logger
from deduction import apply_hint, find_hint
from boardgen import BoardGenerator, GeneratorConfig, GenerationBenchmark


def board_config_from_args(args: argparse.Namespace) -> BoardConfig:
    """Build a board config from a preset, overridden by explicit sizes."""
    preset = DIFFICULTIES[args.difficulty]
    return BoardConfig(
        rows=args.rows or preset.rows,
        cols=args.cols or preset.cols,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def start_from_args(args: argparse.Namespace, config: BoardConfig):
    if args.start:
        return tuple(args.start)
    return config.rows // 2, config.cols // 2


def generate(args: argparse.Namespace) -> None:
    """Generate a board and print it."""
    config = board_config_from_args(args)
    start_row, start_col = start_from_args(args, config)

    generator = BoardGenerator(
        GeneratorConfig(max_attempts=args.max_attempts),
        rng=random.Random(args.seed),
    )
    result = generator.generate(
        config.rows, config.cols, config.num_mines, start_row, start_col
    )
    flood_fill(result.grid, start_row, start_col)

    print(
        f"Board: {config.rows}x{config.cols} with {config.num_mines} mines, "
        f"start ({start_row}, {start_col})"
    )
    if result.fallback:
        print(f"No solvable layout in {result.attempts} attempts - empty board")
    else:
        print(f"Found solvable layout in {result.attempts} attempt(s)")
    print()
    print(result.grid.render(show_mines=args.show_mines))


def hint(args: argparse.Namespace) -> None:
    """Generate a board, open the start and print the first logical hint."""
    config = board_config_from_args(args)
    start_row, start_col = start_from_args(args, config)

    generator = BoardGenerator(
        GeneratorConfig(max_attempts=args.max_attempts),
        rng=random.Random(args.seed),
    )
    grid = generator.generate(
        config.rows, config.cols, config.num_mines, start_row, start_col
    ).grid
    flood_fill(grid, start_row, start_col)

    found = find_hint(grid)
    if found is None:
        print("No logical deduction available.")
        print(grid.render())
        return

    apply_hint(grid, found)
    print(f"Hint: {found.describe()}")
    print()
    print(grid.render())


def benchmark(args: argparse.Namespace) -> None:
    """Measure how many attempts generation needs."""
    generator_config = GeneratorConfig(max_attempts=args.max_attempts, seed=args.seed)
    bench = GenerationBenchmark(
        board_config_from_args(args), generator_config, num_runs=args.runs
    )

    if args.all:
        results = bench.compare(DIFFICULTIES)
    else:
        results = {args.difficulty: bench.run().to_dict()}

    print("\n" + "=" * 64)
    print("Generation Benchmark Results")
    print("=" * 64)
    print(
        f"{'Config':<14} {'Success':<10} {'Fallbacks':<10} "
        f"{'Avg Tries':<10} {'Max Tries':<10} {'Avg Time':<8}"
    )
    print("-" * 64)

    for name, metrics in results.items():
        print(
            f"{name:<14} {metrics['success_rate']:>8.1%} "
            f"{metrics['fallbacks']:>10d} "
            f"{metrics['mean_attempts']:>10.1f} "
            f"{metrics['max_attempts']:>10d} "
            f"{metrics['mean_seconds']:>8.3f}s"
        )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size and mine count",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override rows")
    parser.add_argument("--cols", type=int, default=None, help="Override columns")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")
    parser.add_argument(
        "--max-attempts", type=int, default=500, help="Generation attempt budget"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="No-guess minefield - generate boards and logical hints"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate a board")
    add_board_arguments(generate_parser)
    generate_parser.add_argument(
        "--start", type=int, nargs=2, metavar=("ROW", "COL"), help="First reveal"
    )
    generate_parser.add_argument(
        "--show-mines", action="store_true", help="Draw hidden mines"
    )

    # Hint command
    hint_parser = subparsers.add_parser(
        "hint", help="Generate a board and show the first logical hint"
    )
    add_board_arguments(hint_parser)
    hint_parser.add_argument(
        "--start", type=int, nargs=2, metavar=("ROW", "COL"), help="First reveal"
    )

    # Benchmark command
    benchmark_parser = subparsers.add_parser(
        "benchmark", help="Measure generation attempts"
    )
    add_board_arguments(benchmark_parser)
    benchmark_parser.add_argument(
        "--runs", type=int, default=20, help="Boards to generate per config"
    )
    benchmark_parser.add_argument(
        "--all", action="store_true", help="Benchmark every preset"
    )

    args = parser.parse_args()
    setup_logger(level=args.log_level)

    if args.command == "generate":
        generate(args)
    elif args.command == "hint":
        hint(args)
    elif args.command == "benchmark":
        benchmark(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
