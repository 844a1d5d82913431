"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# Five mines down the middle column of a 5x5 board. Column 0 is all
# zeros, column 1 is the numbered border, columns 3-4 sit behind the wall.
WALL_MINES = [(row, 2) for row in range(5)]


def make_board(rows: int, cols: int, mines) -> Board:
    """Build a board with an explicit mine layout."""
    board = Board(BoardConfig(rows, cols, 0))
    board.initialize(rows, cols, len(mines), mine_positions=mines)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board_factory():
    """Factory for boards with an explicit mine layout."""
    return make_board


@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 10x10 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with a wall of mines in column 2."""
    return make_board(5, 5, WALL_MINES)


@pytest.fixture
def tiny_board() -> Board:
    """Create a 2x2 board with a single mine at (0, 0)."""
    return make_board(2, 2, [(0, 0)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 4x5 board with one mine in the bottom-right corner."""
    return make_board(4, 5, [(3, 4)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
