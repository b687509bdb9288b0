#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S] [-v]
    python main.py demo [--games G] [--delay D] [--seed S]
"""
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional

import numpy as np

# Run from the repository root without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    GameEngine,
    MinesweeperEnv,
    OutOfBoundsError,
    Snapshot,
)


HELP_TEXT = "Commands: r X Y (reveal), f X Y (flag), n (new game), q (quit)"


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def draw(snapshot: Snapshot) -> None:
    """Print a snapshot with column and row labels."""
    lines = snapshot.render().split("\n")
    print(lines[0])
    print("  " + " ".join(str(x % 10) for x in range(snapshot.size)))
    for y, row in enumerate(lines[1:]):
        print(f"{y % 10} {row}")


def parse_command(line: str) -> Optional[tuple]:
    """Split a command line into (verb, x, y) or (verb,)."""
    parts = line.split()
    if not parts:
        return None
    verb = parts[0].lower()
    if verb in ("n", "q"):
        return (verb,)
    if verb in ("r", "f") and len(parts) == 3:
        try:
            return verb, int(parts[1]), int(parts[2])
        except ValueError:
            return None
    return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = BoardConfig(args.size, args.mines)
    rng = np.random.default_rng(args.seed)

    engine = GameEngine(Board.generate(config, rng))
    engine.subscribe(draw)
    draw(engine.snapshot())
    print(HELP_TEXT)

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        command = parse_command(line)
        if command is None:
            print(HELP_TEXT)
            continue

        verb = command[0]
        if verb == "q":
            break
        if verb == "n":
            engine.new_game(config.size, config.num_mines, rng=rng)
            continue

        _, x, y = command
        try:
            if verb == "r":
                engine.reveal_tile(x, y)
            else:
                engine.flag_tile(x, y)
        except OutOfBoundsError as exc:
            print(exc)


def demo(args: argparse.Namespace) -> None:
    """Watch a random player click through games."""
    config = BoardConfig(args.size, args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    print(f"Board: {config.size}x{config.size} with {config.num_mines} mines")
    wins = 0

    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0
        info = {}

        while not done:
            # Random player only reveals
            mask = env.get_action_mask()[:config.area]
            action = int(rng.choice(np.flatnonzero(mask)))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({action % config.size}, {action // config.size})\n")
            print(env.render())
            time.sleep(args.delay)

        if info.get("game_state") == "WON":
            wins += 1

    print(f"\nFinal: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%)")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine debug output"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    demo_parser = subparsers.add_parser("demo", help="Watch a random player")
    for sub in (play_parser, demo_parser):
        sub.add_argument("--size", type=int, default=BoardConfig().size, help="Board size")
        sub.add_argument("--mines", type=int, default=BoardConfig().num_mines, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games to play"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
