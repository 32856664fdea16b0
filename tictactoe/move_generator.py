"""
Move generation for TicTacToe.
Candidate moves are the empty cells, in ascending index order.
"""

from typing import List, Sequence

from .board import Board, to_board


CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


def available_moves(board: Sequence) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: Any 9-cell board accepted by to_board.

    Returns:
        Cell indices in ascending order. The search relies on this order
        for its lowest-index tie-break.

    Raises:
        InvalidArgumentError: If the board is malformed.
    """
    return _available_moves(to_board(board))


def is_full(board: Sequence) -> bool:
    """True if no empty cell remains."""
    return _is_full(to_board(board))


# Unchecked versions for boards already built by to_board (search hot path)

def _available_moves(board: Board) -> List[int]:
    return [index for index, cell in enumerate(board) if cell is None]


def _is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)
