#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py play [--level N] [--seed S]
    python main.py simulate [--games N] [--level N] [--seed S]
"""
import argparse
import sys

import numpy as np

from termsweeper import GameConfig, MinesweeperEnv


def play(args: argparse.Namespace) -> None:
    """Play interactively in the current terminal."""
    from termsweeper.terminal import play as play_in_terminal

    config = GameConfig(initial_level=args.level, seed=args.seed)
    try:
        machine = play_in_terminal(config)
    except ValueError as error:
        print(f"Cannot start game: {error}")
        sys.exit(1)

    print(f"Thanks for playing! Last difficulty level: {machine.level}")


def simulate(args: argparse.Namespace) -> None:
    """Let a random clicker play and print the results."""
    if args.games < 1:
        raise ValueError("--games must be at least 1")

    config = GameConfig(initial_level=args.level, seed=args.seed)
    env = MinesweeperEnv(config=config, terminal_size=(args.columns, args.lines))
    rng = np.random.default_rng(args.seed)

    print(
        f"Simulating {args.games} games at level {args.level} on a "
        f"{env.board.config.columns}x{env.board.config.rows} board..."
    )

    wins = 0
    total_moves = 0
    total_reward = 0.0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False

        while not done:
            valid_actions = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_actions))
            _, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            done = terminated or truncated

        wins += int(info["won"])
        total_moves += info["moves"]

    print(f"Results over {args.games} games:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg moves: {total_moves / args.games:.1f}")
    print(f"  Avg reward: {total_reward / args.games:.2f}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--level", type=int, default=1, help="Starting difficulty level (1-9)"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for bomb placement"
    )

    # Simulate command
    sim_parser = subparsers.add_parser(
        "simulate", help="Watch a random clicker play headless games"
    )
    sim_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    sim_parser.add_argument(
        "--level", type=int, default=5, help="Difficulty level (1-9)"
    )
    sim_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible runs"
    )
    sim_parser.add_argument(
        "--columns", type=int, default=80, help="Terminal columns to size for"
    )
    sim_parser.add_argument(
        "--lines", type=int, default=24, help="Terminal lines to size for"
    )

    args = parser.parse_args()

    try:
        if args.command == "simulate":
            simulate(args)
        else:
            if args.command is None:
                args = play_parser.parse_args([])
            play(args)
    except ValueError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
