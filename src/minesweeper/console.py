"""
Interactive terminal session for Minesweeper.

Reads one command per line, applies it to the board and prints the
updated board. Commands:

    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           start a new game
    q           quit
"""
from dataclasses import dataclass
from typing import Callable, Optional

from .board import Board, MinesweeperError
from .render import render_with_header, status_line


# ============================================================================
# Command Parsing
# ============================================================================

REVEAL = "reveal"
FLAG = "flag"
NEW_GAME = "new"
QUIT = "quit"

_ALIASES = {
    "r": REVEAL,
    "reveal": REVEAL,
    "f": FLAG,
    "flag": FLAG,
    "n": NEW_GAME,
    "new": NEW_GAME,
    "q": QUIT,
    "quit": QUIT,
}

HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


class CommandError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: str
    row: Optional[int] = None
    col: Optional[int] = None


def parse_command(line: str) -> Command:
    """
    Parse a command line.

    Args:
        line: Raw player input, e.g. ``"r 3 4"``.

    Returns:
        The parsed command.

    Raises:
        CommandError: If the line is empty, unknown or malformed.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Empty command")

    action = _ALIASES.get(parts[0].lower())
    if action is None:
        raise CommandError(f"Unknown command: {parts[0]}")

    if action in (NEW_GAME, QUIT):
        if len(parts) != 1:
            raise CommandError(f"'{parts[0]}' takes no arguments")
        return Command(action)

    if len(parts) != 3:
        raise CommandError(f"'{parts[0]}' needs a row and a column")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise CommandError("Row and column must be integers") from None
    return Command(action, row, col)


# ============================================================================
# Session
# ============================================================================

class ConsoleSession:
    """
    Drives a board from text commands.

    Input and output are injectable so the loop can run against
    scripted input.
    """

    def __init__(
        self,
        board: Board,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.board = board
        self.input_fn = input_fn
        self.output_fn = output_fn

    def apply(self, command: Command) -> bool:
        """
        Apply a command to the board.

        Returns:
            False when the session should stop, True otherwise.
        """
        if command.action == QUIT:
            return False
        if command.action == NEW_GAME:
            self.board.reset()
        elif command.action == REVEAL:
            self.board.reveal(command.row, command.col)
        elif command.action == FLAG:
            self.board.toggle_flag(command.row, command.col)
        return True

    def show(self) -> None:
        """Print the status line and the board."""
        self.output_fn(status_line(self.board))
        self.output_fn(render_with_header(self.board))

    def run(self) -> None:
        """Read and apply commands until quit or end of input."""
        self.output_fn(HELP)
        self.show()
        while True:
            try:
                line = self.input_fn("> ")
            except EOFError:
                break

            try:
                command = parse_command(line)
                if not self.apply(command):
                    break
            except (CommandError, MinesweeperError) as error:
                self.output_fn(f"Error: {error}")
                continue

            self.show()
            if not self.board.is_playing:
                self.output_fn("Type 'n' for a new game or 'q' to quit.")
