"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .board import Board, Player, index_to_coords, to_board
from .move_generator import _is_full

logger = logging.getLogger(__name__)


# All possible winning lines (as index triplets)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def has_won(board: Sequence, player: Union[Player, str, None]) -> bool:
    """
    True if any line holds three of player's marks.

    Args:
        board: Any 9-cell board accepted by to_board.
        player: Player or "X"/"O"; None never wins.

    Raises:
        InvalidArgumentError: Malformed board or unknown symbol.
    """
    board = to_board(board)
    if player is None:
        return False
    return _has_won(board, Player.parse(player))


def winner(board: Sequence) -> Optional[Player]:
    """The player with three in a line, or None."""
    return _winner(to_board(board))


def winning_line(board: Sequence) -> Optional[Tuple[int, int, int]]:
    """The first completed line in line order, or None."""
    board = to_board(board)
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def is_draw(board: Sequence) -> bool:
    """True if the board is full and nobody has won."""
    board = to_board(board)
    return _is_full(board) and _winner(board) is None


def is_terminal(board: Sequence) -> bool:
    """True if someone has won or no empty cell remains."""
    board = to_board(board)
    return _winner(board) is not None or _is_full(board)


# Unchecked versions for boards already built by to_board (search hot path)

def _has_won(board: Board, player: Player) -> bool:
    return any(
        board[a] == player and board[b] == player and board[c] == player
        for a, b, c in WINNING_LINES
    )


def _winner(board: Board) -> Optional[Player]:
    for player in Player:
        if _has_won(board, player):
            return player
    return None


class WinChecker:
    """
    Applies the win/draw rules to a running GameState.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, game_state) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return winner(game_state.board)

    def check_draw(self, game_state) -> bool:
        """Check if the game is a draw (board full and no winner)."""
        return is_draw(game_state.board)

    def get_winning_line(self, game_state) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        line = winning_line(game_state.board)
        if line is None:
            return None
        return [index_to_coords(index) for index in line]

    def update_game_state(self, game_state):
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        found = self.check_winner(game_state)

        if found is not None:
            game_state.winner = found
            game_state.winning_line = winning_line(game_state.board)
            game_state.is_game_over = True
            logger.info("Game won by %s on line %s", found.value, game_state.winning_line)
        elif self.check_draw(game_state):
            game_state.is_draw = True
            game_state.is_game_over = True
            logger.info("Game ended in a draw")

        return game_state
