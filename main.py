#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py evaluate [--games N] [--seed S]
"""
import argparse

from src.minesweeper.board import Board, BoardConfig, InvalidConfigurationError
from src.minesweeper.console import ConsoleSession
from src.minesweeper.environment import MinesweeperEnv
from src.agents import RandomAgent


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from command-line flags."""
    return BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    board = Board(build_config(args), seed=args.seed)
    ConsoleSession(board).run()


def evaluate(args: argparse.Namespace) -> None:
    """Let the random agent play several games and report the results."""
    config = build_config(args)
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(config.rows, config.cols, seed=args.seed)

    print(f"Playing {args.games} games on {config.rows}x{config.cols} "
          f"with {config.num_mines} mines...")

    wins = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        result = agent.play_episode(env, seed=seed)
        wins += int(result.won)
        total_revealed += result.revealed

    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rows", type=int, default=10, help="Number of rows")
    parser.add_argument("--cols", type=int, default=10, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Run the random agent over several games"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except InvalidConfigurationError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
