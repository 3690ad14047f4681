#!/usr/bin/env python3
"""Watch the hint finder clear generated boards without guessing."""
import os
import random
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig, HintKind, setup_logger
from boardgen import BoardGenerator
from gameplay import Game, GameStatus


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 5,
    rows: int = 9,
    cols: int = 9,
    mines: int = 10,
    seed=None,
):
    """Run demo games, playing only moves the hint finder proves."""
    config = BoardConfig(rows=rows, cols=cols, num_mines=mines)
    game = Game(config, BoardGenerator(rng=random.Random(seed)))

    print(f"Board: {rows}x{cols} with {mines} mines ({100*mines/(rows*cols):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    cleared = 0

    for number in range(games):
        game.reset()
        game.reveal(rows // 2, cols // 2)
        step = 0

        while game.status == GameStatus.PLAYING:
            found = game.hint()

            clear_screen()
            print(f"=== Game {number + 1}/{games} | Step {step} ===")
            print(f"Cleared so far: {cleared} | Mines left: {game.mines_remaining}\n")
            print(game.grid.render())

            if found is None:
                print("\n*** Stuck: no logical move ***")
                break

            print(f"\nNext: {found.describe()}")
            time.sleep(delay)

            if found.kind == HintKind.MINE:
                game.toggle_flag(found.row, found.col)
            else:
                game.reveal(found.row, found.col)
            step += 1

        if game.status == GameStatus.WON:
            cleared += 1
            clear_screen()
            print(f"=== Game {number + 1}/{games} | {step} steps ===\n")
            print(game.grid.render())
            print("\n*** CLEARED ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {cleared}/{games} cleared ({100*cleared/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--rows", type=int, default=9, help="Board rows")
    parser.add_argument("--cols", type=int, default=9, help="Board columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    setup_logger(level=args.log_level)
    demo(
        delay=args.delay,
        games=args.games,
        rows=args.rows,
        cols=args.cols,
        mines=args.mines,
        seed=args.seed,
    )
