"""
TicTacToe Engine
================
Game-state rules and a computer opponent for 3x3 TicTacToe.
The AI has three levels: easy (random), medium (win/block/center/corner)
and hard (minimax with alpha-beta pruning).
"""

from .board import (
    Board,
    Player,
    coords_to_index,
    empty_board,
    format_board,
    index_to_coords,
    to_board,
)
from .errors import (
    InvalidArgumentError,
    InvalidMoveError,
    InvalidStateError,
    OccupiedCellError,
    TicTacToeError,
)
from .move_generator import available_moves, is_full
from .win_checker import WinChecker, has_won, is_draw, is_terminal, winner
from .minimax import MinimaxEngine
from .ai_player import AIPlayer, Difficulty, choose_move
from .game_state import GameState, Move

__version__ = "1.0.0"
