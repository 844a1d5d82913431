"""
Cell module for Minesweeper.

A cell holds its content (mine, or the number of neighboring mines) and
what the player has done to it (nothing, revealed, flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Adjacency value reported for a mine cell
MINE = -1

# Observation codes
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


class CellState(Enum):
    """What the player can see of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


_FLAG_TOGGLE = {
    CellState.HIDDEN: CellState.FLAGGED,
    CellState.FLAGGED: CellState.HIDDEN,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the Minesweeper grid.

    Revealed and flagged are mutually exclusive, so both live in a single
    ``state``. Once revealed, a cell never goes back.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Mines among the neighboring cells (0-8).
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Uncover a hidden cell.

        Returns:
            False if the cell is flagged or already revealed.
        """
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flag a hidden cell or unflag a flagged one.

        Returns:
            False if the cell is revealed.
        """
        if self.is_revealed:
            return False
        self.state = _FLAG_TOGGLE[self.state]
        return True

    @property
    def adjacency(self) -> int:
        """Neighbor mine count, or MINE for a mine cell."""
        return MINE if self.is_mine else self.adjacent_mines

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the player-visible cell as an integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.is_hidden:
            return OBS_HIDDEN
        if self.is_flagged:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
