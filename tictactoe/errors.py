"""
Errors raised by the TicTacToe engine.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(TicTacToeError, ValueError):
    """Malformed symbol, board shape, index or difficulty."""


class InvalidStateError(TicTacToeError, RuntimeError):
    """The board is terminal, so there is no move to compute."""


class OccupiedCellError(TicTacToeError, AssertionError):
    """A mark was applied to a non-empty cell (internal bookkeeping bug)."""


class InvalidMoveError(TicTacToeError, ValueError):
    """A player tried an illegal move in a running game."""
