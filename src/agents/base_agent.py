"""
Base agent interface for automated Minesweeper players.

Defines the abstract interface that all agents implement and a shared
loop that plays one game through the environment.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np


# ============================================================================
# Episode Result
# ============================================================================

@dataclass
class EpisodeResult:
    """Outcome of one played game."""

    game_state: str
    steps: int
    revealed: int
    total_reward: float

    @property
    def won(self) -> bool:
        return self.game_state == "WON"


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents pick the next cell to reveal from the current observation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
        """
        self.rows = rows
        self.cols = cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * cols + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.cols, action % self.cols

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Hidden cells (value -1) are the valid actions."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for a new game."""

    def play_episode(
        self,
        env,
        seed: Optional[int] = None,
        on_step: Optional[Callable[[int, dict], None]] = None,
    ) -> EpisodeResult:
        """
        Play one game to completion.

        Args:
            env: A MinesweeperEnv.
            seed: Seed passed to env.reset().
            on_step: Called with (action, info) after every step.

        Returns:
            Summary of the finished game.
        """
        obs, info = env.reset(seed=seed)
        self.reset()
        total_reward = 0.0
        done = False

        while not done:
            action = self.select_action(obs, env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            done = terminated or truncated
            if on_step is not None:
                on_step(action, info)

        return EpisodeResult(
            game_state=info["game_state"],
            steps=info["steps"],
            revealed=info["revealed"],
            total_reward=total_reward,
        )
