"""
Minesweeper board engine.

Provides board generation, reveal/flag actions with flood-fill,
win/loss detection, text rendering and a gymnasium environment.
"""
from .cell import Cell, CellState, MINE
from .board import (
    Board,
    BoardConfig,
    GameState,
    DEFAULT_CONFIG,
    MinesweeperError,
    InvalidConfigurationError,
    InvalidCoordinateError,
)
from .render import render_board, render_with_header, status_line
from .console import ConsoleSession, Command, CommandError, parse_command
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "MinesweeperError",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    "render_board",
    "render_with_header",
    "status_line",
    "ConsoleSession",
    "Command",
    "CommandError",
    "parse_command",
    "MinesweeperEnv",
]
