"""
Move validator for TicTacToe.
Validates player moves in a running game and the inputs of an AI move request.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .board import BOARD_SIZE, Board, Player, to_board
from .errors import InvalidArgumentError, InvalidStateError
from .win_checker import is_terminal, winner


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, game_state, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not _is_position(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        occupant = game_state.board[row * BOARD_SIZE + col]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()


def _is_position(row, col) -> bool:
    for value in (row, col):
        if not isinstance(value, int) or isinstance(value, bool):
            return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def validate_ai_request(
    board: Sequence,
    ai_player: Union[Player, str],
    human_player: Union[Player, str],
) -> Tuple[Board, Player, Player]:
    """
    Check the preconditions of an AI move request.

    Returns:
        The normalized (board, ai_player, human_player).

    Raises:
        InvalidArgumentError: Bad symbols, equal symbols or bad board shape.
        InvalidStateError: The board already has a winner or is full.
    """
    ai = Player.parse(ai_player)
    human = Player.parse(human_player)
    if ai == human:
        raise InvalidArgumentError(
            f"AI and human must use different symbols, both are {ai.value}"
        )

    board = to_board(board)
    if is_terminal(board):
        found = winner(board)
        state = f"{found.value} has already won" if found else "the board is full"
        raise InvalidStateError(f"No move to compute: {state}")

    return board, ai, human
