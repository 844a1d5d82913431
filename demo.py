#!/usr/bin/env python3
"""Watch the random agent play Minesweeper."""
import time
import os

from src.minesweeper.board import BoardConfig
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.render import status_line
from src.agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 10, mines: int = 10):
    """Run demo games with visualization."""
    config = BoardConfig(rows=size, cols=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(size, size)

    print(f"Board: {size}x{size} with {mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        def show_step(action: int, info: dict) -> None:
            row, col = agent.action_to_position(action)
            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {info['steps']} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})  {status_line(env.board)}\n")
            print(env.render())
            time.sleep(delay)

        result = agent.play_episode(env, on_step=show_step)
        if result.won:
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")

        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=10, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines)
