#!/usr/bin/env python3
"""
Minefield - terminal front end for the Minesweeper engine.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--rows R --cols C --mines M]
    python main.py demo [--games N] [--seed S]
"""
import argparse
import logging
import random
from typing import Optional

from src.minefield import (
    ConfigurationError,
    GameConfig,
    MinefieldEnv,
    Outcome,
    PRESETS,
    render_board,
    reset,
    reveal,
    toggle_flag,
)

HELP_TEXT = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"
)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Preset by name, or a clamped custom triple when any size flag is set."""
    if args.rows is None and args.cols is None and args.mines is None:
        return GameConfig.from_preset(args.difficulty)
    base = GameConfig.from_preset(args.difficulty)
    return GameConfig.custom(
        args.rows if args.rows is not None else base.rows,
        args.cols if args.cols is not None else base.cols,
        args.mines if args.mines is not None else base.mines,
    )


def parse_move(line: str) -> Optional[tuple]:
    """Parse 'r ROW COL' or 'f ROW COL' into (action, row, col)."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = build_config(args)
    rng = random.Random(args.seed)
    session = reset(config, rng=rng)

    print(f"Board: {config.rows}x{config.cols} with {config.mines} mines")
    print(HELP_TEXT)

    while True:
        snapshot = session.snapshot()
        print()
        print(render_board(snapshot, coordinates=True))
        print(f"Mines left: {snapshot.remaining_mines}")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line == "q":
            break
        if line == "n":
            session = reset(config, rng=rng)
            continue

        move = parse_move(line)
        if move is None:
            print(HELP_TEXT)
            continue

        action, row, col = move
        if not session.board.in_bounds(row, col):
            print(f"({row}, {col}) is off the board")
            continue

        if action == "f":
            session = toggle_flag(session, row, col)
            continue

        session, outcome = reveal(session, row, col)
        if outcome == Outcome.LOST:
            print()
            print(render_board(session.snapshot(), coordinates=True))
            print("\n*** Game Over! You hit a mine. ***")
            session = _ask_new_game(config, rng)
        elif outcome == Outcome.WON:
            print()
            print(render_board(session.snapshot(), coordinates=True))
            print("\n*** Congratulations! You won! ***")
            session = _ask_new_game(config, rng)
        if session is None:
            break


def _ask_new_game(config: GameConfig, rng: random.Random):
    try:
        answer = input("Play again? [y/N] ").strip().lower()
    except EOFError:
        return None
    if answer == "y":
        return reset(config, rng=rng)
    return None


def demo(args: argparse.Namespace) -> None:
    """Play games with random valid reveals and report the win rate."""
    config = build_config(args)
    env = MinefieldEnv(config=config, render_mode="ansi")
    env.action_space.seed(args.seed)

    print(f"Board: {config.rows}x{config.cols} with {config.mines} mines")

    wins = 0
    total_steps = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        steps = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            steps += 1

        total_steps += steps
        if info["phase"] == "won":
            wins += 1
        if args.show:
            print(f"\n=== Game {game + 1}/{args.games} | {info['phase'].upper()} ===")
            print(env.render())

    print(f"\n=== Final: {wins}/{args.games} wins ({wins / args.games:.1%}) ===")
    print(f"Avg steps: {total_steps / args.games:.1f}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--difficulty", choices=list(PRESETS), default="easy",
            help="Difficulty preset",
        )
        sub.add_argument("--rows", type=int, default=None, help="Custom rows (5-40)")
        sub.add_argument("--cols", type=int, default=None, help="Custom columns (5-40)")
        sub.add_argument("--mines", type=int, default=None, help="Custom mine count")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    add_board_args(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_args(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    demo_parser.add_argument(
        "--show", action="store_true", help="Print the final board of each game"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except ConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
