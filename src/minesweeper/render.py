"""
Text rendering for Minesweeper boards.

Turns the engine's read accessors into plain-text grids and a status
line for terminals and the ansi render mode.
"""
from typing import List, Optional

from .board import Board, GameState


HIDDEN = "."
FLAG = "F"
MINE = "*"
WRONG_FLAG = "X"
EMPTY = " "


def cell_symbol(board: Board, row: int, col: int, show_mines: bool) -> str:
    """Symbol for a single cell."""
    cell = board.get_cell(row, col)
    if cell.is_flagged:
        if board.is_lost and not cell.is_mine:
            return WRONG_FLAG
        return FLAG
    if cell.is_mine and (cell.is_revealed or show_mines):
        return MINE
    if not cell.is_revealed:
        return HIDDEN
    if cell.adjacent_mines == 0:
        return EMPTY
    return str(cell.adjacent_mines)


def render_rows(board: Board, show_mines: Optional[bool] = None) -> List[str]:
    """
    Render each board row as a string.

    Args:
        board: Board to render.
        show_mines: Show hidden mines. Defaults to True once the game
            is lost.

    Returns:
        One string per row, cells separated by spaces.
    """
    if show_mines is None:
        show_mines = board.is_lost
    return [
        " ".join(
            cell_symbol(board, row, col, show_mines)
            for col in range(board.cols)
        )
        for row in range(board.rows)
    ]


def render_board(board: Board, show_mines: Optional[bool] = None) -> str:
    """Render board as a multi-line string."""
    return "\n".join(render_rows(board, show_mines))


def render_with_header(board: Board, show_mines: Optional[bool] = None) -> str:
    """Render board with column indices on top and row indices on the left."""
    width = len(str(max(board.rows, board.cols) - 1))
    header = " " * (width + 1) + " ".join(
        str(col % 10) for col in range(board.cols)
    )
    lines = [header]
    for row, text in enumerate(render_rows(board, show_mines)):
        lines.append(f"{row:>{width}} {text}")
    return "\n".join(lines)


def status_line(board: Board) -> str:
    """Short status text: remaining mines, or the game outcome."""
    if board.game_state == GameState.LOST:
        return "Game Over"
    if board.game_state == GameState.WON:
        return "You Win!"
    return f"Mines: {board.remaining_mines}"
