"""
Board model for TicTacToe.
A board is a tuple of 9 cells, each None (empty) or a Player mark.
Index i maps to row i // 3, column i % 3.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .errors import InvalidArgumentError, OccupiedCellError


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Spellings accepted for an empty cell
EMPTY_SPELLINGS = {"", " ", "_", "-", "."}


class Player(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @classmethod
    def parse(cls, value: Union["Player", str]) -> "Player":
        """
        Convert a Player or "X"/"O" string into a Player.

        Raises:
            InvalidArgumentError: If the value is not one of the two marks.
        """
        if isinstance(value, Player):
            return value
        if isinstance(value, str) and value.strip().upper() in ("X", "O"):
            return cls(value.strip().upper())
        raise InvalidArgumentError(f"Invalid player symbol: {value!r}. Must be 'X' or 'O'.")


Cell = Optional[Player]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create an empty board."""
    return (None,) * CELL_COUNT


def _parse_cell(cell) -> Cell:
    if cell is None or isinstance(cell, Player):
        return cell
    if isinstance(cell, str):
        text = cell.strip().upper()
        if text in EMPTY_SPELLINGS:
            return None
        if text in ("X", "O"):
            return Player(text)
    raise InvalidArgumentError(f"Invalid cell value: {cell!r}")


def to_board(cells: Union[Sequence, str]) -> Board:
    """
    Normalize a 9-cell sequence into a Board.

    Accepts Player values, "X"/"O" strings and the usual empty spellings
    (None, "", " ", "_", "-", "."). A 9-character string such as
    "XX_OO____" is read cell by cell.

    Raises:
        InvalidArgumentError: Wrong number of cells or an unknown cell value.
    """
    if cells is None or not isinstance(cells, (str, Sequence)):
        raise InvalidArgumentError(f"Board must be a sequence of {CELL_COUNT} cells")
    if len(cells) != CELL_COUNT:
        raise InvalidArgumentError(
            f"Board must have exactly {CELL_COUNT} cells, got {len(cells)}"
        )
    return tuple(_parse_cell(cell) for cell in cells)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def index_to_coords(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    if not _is_int(index) or not 0 <= index < CELL_COUNT:
        raise InvalidArgumentError(f"Invalid index: {index!r}. Must be 0-8.")
    return divmod(index, BOARD_SIZE)


def coords_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    if not (_is_int(row) and _is_int(col)) or not (
        0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
    ):
        raise InvalidArgumentError(f"Invalid position ({row!r}, {col!r}). Must be 0-2.")
    return row * BOARD_SIZE + col


def place(board: Board, index: int, player: Player) -> Board:
    """
    Return a new board with player's mark at index.

    Raises:
        OccupiedCellError: If the cell already holds a mark.
    """
    if board[index] is not None:
        raise OccupiedCellError(f"Cell {index} is already occupied by {board[index].value}")
    return board[:index] + (player,) + board[index + 1:]


def count_marks(board: Board, player: Player) -> int:
    return sum(1 for cell in board if cell == player)


def is_well_formed(board: Board) -> bool:
    """True if X has as many marks as O, or exactly one more."""
    diff = count_marks(board, Player.X) - count_marks(board, Player.O)
    return diff in (0, 1)


def next_player(board: Board) -> Player:
    """Whose turn it is, assuming X moved first."""
    if count_marks(board, Player.X) > count_marks(board, Player.O):
        return Player.O
    return Player.X


def format_board(board: Sequence[Cell]) -> str:
    """Format a board for console display."""
    rows = []
    for row in range(BOARD_SIZE):
        cells = board[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
        rows.append(" | ".join(cell.value if cell else "-" for cell in cells))
    return ("\n" + "-" * 9 + "\n").join(rows)
