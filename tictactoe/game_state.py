"""
Game state management for TicTacToe.
Tracks the board, current player, move history and result.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from .board import (
    CELL_COUNT,
    Board,
    Cell,
    Player,
    coords_to_index,
    format_board,
    index_to_coords,
    to_board,
)
from .errors import InvalidArgumentError, InvalidMoveError
from .move_generator import available_moves
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

STATUS_PLAYING = "playing"
STATUS_WIN = "win"
STATUS_DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    index: int              # Cell index (0-8)
    move_number: int        # 1 for the first move of the game

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player.value,
            "row": self.row,
            "col": self.col,
            "index": self.index,
            "move_number": self.move_number,
        }


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 9-cell board (None means empty)
    - Current player (X moves first)
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: List[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)

    current_player: Player = Player.X

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    is_game_over: bool = False

    @property
    def status(self) -> str:
        if self.winner is not None:
            return STATUS_WIN
        if self.is_draw:
            return STATUS_DRAW
        return STATUS_PLAYING

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def make_move(self, row: int, col: int) -> str:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The game status after the move.

        Raises:
            InvalidMoveError: If the game is over, the position is off the
                board or the cell is occupied.
        """
        result = MoveValidator().validate_move(self, row, col)
        if not result.is_valid:
            logger.warning("Invalid move attempted at (%s, %s): %s", row, col, result.error_message)
            raise InvalidMoveError(result.error_message)

        index = coords_to_index(row, col)
        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            index=index,
            move_number=len(self.moves) + 1,
        ))
        logger.info("Move made: %s at (%d, %d)", self.current_player.value, row, col)

        WinChecker().update_game_state(self)

        # The winner stays the current player once the game is over
        if not self.is_game_over:
            self.current_player = self.current_player.opposite()

        return self.status

    def make_move_at(self, index: int) -> str:
        """Make a move by cell index (0-8)."""
        try:
            row, col = index_to_coords(index)
        except InvalidArgumentError as exc:
            raise InvalidMoveError(str(exc)) from exc
        return self.make_move(row, col)

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the mark at (row, col), or None if empty."""
        return self.board[coords_to_index(row, col)]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        return [index_to_coords(index) for index in available_moves(self.board)]

    def available_moves(self) -> List[int]:
        """Empty cell indices, or nothing once the game is over."""
        if self.is_game_over:
            return []
        return available_moves(self.board)

    def snapshot(self) -> Board:
        """Immutable copy of the board for the AI."""
        return tuple(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=[replace(move) for move in self.moves],
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
        )

    def reset(self) -> None:
        """Start a new game."""
        self.board = [None] * CELL_COUNT
        self.current_player = Player.X
        self.moves = []
        self.winner = None
        self.winning_line = None
        self.is_draw = False
        self.is_game_over = False
        logger.info("Game reset")

    def format(self) -> str:
        """The board as text, followed by the game status."""
        lines = [format_board(self.board), ""]
        if self.winner is not None:
            lines.append(f"{self.winner.value} WINS!")
        elif self.is_draw:
            lines.append("It's a DRAW!")
        else:
            lines.append(f"Current turn: {self.current_player.value}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready representation of the game."""
        return {
            "board": [cell.value if cell else "" for cell in self.board],
            "current_player": self.current_player.value,
            "status": self.status,
            "winner": self.winner.value if self.winner else None,
            "winning_line": list(self.winning_line) if self.winning_line else None,
            "moves": [move.to_dict() for move in self.moves],
            "move_count": self.move_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        """
        Restore a game from to_dict() output.

        The result fields are recomputed from the board rather than trusted.

        Raises:
            InvalidArgumentError: Missing or malformed board, player or
                move history.
        """
        if not isinstance(data, dict):
            raise InvalidArgumentError("Invalid state object")

        board = to_board(data.get("board"))
        history = data.get("moves") or []
        if not isinstance(history, list):
            raise InvalidArgumentError("Move history must be a list")
        state = cls(
            board=list(board),
            current_player=Player.parse(data.get("current_player")),
            moves=[
                _move_from_dict(item, number, board)
                for number, item in enumerate(history, start=1)
            ],
        )
        WinChecker().update_game_state(state)
        return state


def _move_from_dict(item: Any, number: int, board: Board) -> Move:
    """
    Rebuild one history entry and check it against the board.

    Raises:
        InvalidArgumentError: Missing fields, a bad position, or a mark
            that is not on the board where the entry says it is.
    """
    if not isinstance(item, dict):
        raise InvalidArgumentError(f"Move {number} is not an object: {item!r}")

    missing = [key for key in ("player", "row", "col", "index") if key not in item]
    if missing:
        raise InvalidArgumentError(f"Move {number} is missing {', '.join(missing)}")

    player = Player.parse(item["player"])
    index = coords_to_index(item["row"], item["col"])
    if item["index"] != index:
        raise InvalidArgumentError(
            f"Move {number}: index {item['index']!r} does not match ({item['row']}, {item['col']})"
        )
    if board[index] != player:
        raise InvalidArgumentError(
            f"Move {number}: cell {index} does not hold {player.value}"
        )

    return Move(
        player=player,
        row=item["row"],
        col=item["col"],
        index=index,
        move_number=item.get("move_number", number),
    )
