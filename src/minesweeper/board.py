"""
Board module for Minesweeper.

Implements the game board with mine placement, adjacency counting,
cell revealing with flood-fill, flagging and game state management.
"""
import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellState


Position = Tuple[int, int]


# ============================================================================
# Errors
# ============================================================================

class MinesweeperError(ValueError):
    """Base class for engine contract violations."""


class InvalidConfigurationError(MinesweeperError):
    """Raised when board dimensions or mine layout are unusable."""


class InvalidCoordinateError(MinesweeperError):
    """Raised when a position lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 10
    cols: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


DEFAULT_CONFIG = BoardConfig(10, 10, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Passing a seed makes mine layouts
    reproducible.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.IN_PROGRESS
    _safe_revealed: int = 0
    _flags: int = 0

    def __post_init__(self) -> None:
        """Lay out the first game after dataclass creation."""
        self._rng = random.Random(self.seed)
        self.initialize(
            self.config.rows, self.config.cols, self.config.num_mines
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(
        self,
        rows: int,
        cols: int,
        mine_count: int,
        seed: Optional[int] = None,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Start a new game, replacing any previous one.

        Everything is validated before the current game is touched.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mine_count: Number of mines to place.
            seed: Reseed the random source before placing mines.
            mine_positions: Exact mine layout, used instead of sampling.

        Raises:
            InvalidConfigurationError: If the dimensions, mine count or
                explicit layout are invalid.
        """
        config = BoardConfig(rows, cols, mine_count)
        positions = None
        if mine_positions is not None:
            positions = self._validate_mine_positions(config, mine_positions)

        if seed is not None:
            self._rng.seed(seed)
        if positions is None:
            positions = self._sample_mine_positions(config)

        self.config = config
        self._init_grid()
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()

        self._game_state = GameState.IN_PROGRESS
        self._safe_revealed = 0
        self._flags = 0

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _sample_mine_positions(self, config: BoardConfig) -> Set[Position]:
        """
        Pick mine positions by rejection sampling.

        Draws uniform (row, col) pairs and discards the ones already
        holding a mine until the requested count is reached.
        """
        mines: Set[Position] = set()
        while len(mines) < config.num_mines:
            position = (
                self._rng.randrange(config.rows),
                self._rng.randrange(config.cols),
            )
            if position not in mines:
                mines.add(position)
        return mines

    @staticmethod
    def _validate_mine_positions(
        config: BoardConfig, mine_positions: Iterable[Position]
    ) -> Set[Position]:
        """Check an explicit mine layout against the configuration."""
        positions = [tuple(position) for position in mine_positions]
        unique = set(positions)
        if len(unique) != len(positions):
            raise InvalidConfigurationError("Duplicate mine positions")
        for row, col in unique:
            if not (0 <= row < config.rows and 0 <= col < config.cols):
                raise InvalidConfigurationError(
                    f"Mine position ({row}, {col}) is outside the board"
                )
        if len(unique) != config.num_mines:
            raise InvalidConfigurationError(
                f"Expected {config.num_mines} mine positions, got {len(unique)}"
            )
        return unique

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """Get in-bounds neighbor positions, without validating the center."""
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise InvalidCoordinateError(
                row, col, self.config.rows, self.config.cols
            )

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the 8-neighborhood of a cell, clipped to the board.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.

        Raises:
            InvalidCoordinateError: If the center is outside the board.
        """
        self._check_position(row, col)
        return self._get_neighbors(row, col)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        If the cell has no adjacent mines, the surrounding empty region and
        its numbered border are revealed too. Revealing a mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the board changed, False if the call was a no-op
            (game over, cell already revealed or flagged).

        Raises:
            InvalidCoordinateError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self._game_state != GameState.IN_PROGRESS:
            return False

        cell = self._grid[row][col]
        if not cell.reveal():
            return False

        if cell.is_mine:
            self._game_state = GameState.LOST
            return True

        self._safe_revealed += 1
        if cell.adjacent_mines == 0:
            self._flood_fill(row, col)

        self._check_win_condition()
        return True

    def _flood_fill(self, row: int, col: int) -> None:
        """Reveal the zero region around an already revealed empty cell."""
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or not neighbor.is_hidden:
                    continue
                neighbor.reveal()
                self._safe_revealed += 1
                if neighbor.adjacent_mines == 0:
                    pending.append((neighbor_row, neighbor_col))

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._safe_revealed >= self.config.safe_cells:
            self._game_state = GameState.WON

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the game is over or the
            cell is revealed.

        Raises:
            InvalidCoordinateError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self._game_state != GameState.IN_PROGRESS:
            return False

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flags += 1 if cell.is_flagged else -1
        return True

    def reset(self) -> None:
        """Start a new game with the current configuration."""
        self.initialize(
            self.config.rows, self.config.cols, self.config.num_mines
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        """Configured number of mines."""
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        return self._flags

    @property
    def remaining_mines(self) -> int:
        """Mines left to find, assuming every flag is correct."""
        return self.config.num_mines - self._flags

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, including an exploded mine."""
        exploded = 1 if self._game_state == GameState.LOST else 0
        return self._safe_revealed + exploded

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get a copy of the cell at position.

        The copy is detached from the board, so changing it has no
        effect on the game.

        Raises:
            InvalidCoordinateError: If the position is outside the board.
        """
        self._check_position(row, col)
        return replace(self._grid[row][col])

    def get_mine_positions(self) -> List[Position]:
        """List mine positions in row-major order."""
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of hidden, unflagged (row, col) positions.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions
