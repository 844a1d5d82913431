"""
Automated Minesweeper players.

Provides agents that play through the gymnasium environment:
- BaseAgent: Shared interface and episode loop
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent, EpisodeResult
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "EpisodeResult",
    "RandomAgent",
]
