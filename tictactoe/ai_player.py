"""
AI player for TicTacToe.
Three difficulty levels behind one choose_move contract:
easy (random), medium (rule cascade) and hard (minimax).
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np

from .board import Board, Player, place, to_board
from .config import AIConfig
from .errors import InvalidArgumentError
from .minimax import MinimaxEngine
from .move_generator import CENTER, CORNERS, _available_moves
from .move_validator import validate_ai_request
from .win_checker import _has_won

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(d.value for d in cls)
        raise InvalidArgumentError(f"Invalid difficulty: {value!r}. Must be one of: {valid}")


def default_rng() -> np.random.Generator:
    """Random source seeded from AIConfig.RANDOM_SEED (None = fresh entropy)."""
    return np.random.default_rng(AIConfig.RANDOM_SEED)


def find_winning_move(board: Sequence, player: Union[Player, str]) -> Optional[int]:
    """
    Find a cell that completes a line for player.

    Returns:
        The lowest such index, or None.
    """
    board = to_board(board)
    player = Player.parse(player)
    for move in _available_moves(board):
        if _has_won(place(board, move, player), player):
            return move
    return None


class AIPlayer:
    """
    An AI that plays TicTacToe at a fixed difficulty.

    The random source is injectable so tests can pass a seeded generator.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = AIConfig.DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: "easy", "medium" or "hard" (or a Difficulty).
            rng: numpy Generator used by easy and medium.
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else default_rng()
        self.engine = MinimaxEngine()

    def choose_move(
        self,
        board: Sequence,
        ai_player: Union[Player, str],
        human_player: Union[Player, str],
    ) -> int:
        """
        Get the AI's move for the current position.

        Args:
            board: 9-cell board; it is never modified.
            ai_player: The AI's mark.
            human_player: The opponent's mark.

        Returns:
            Index (0-8) of the chosen cell.

        Raises:
            InvalidArgumentError: Bad symbols or board shape.
            InvalidStateError: The board is already terminal.
        """
        board, ai, human = validate_ai_request(board, ai_player, human_player)

        if self.difficulty == Difficulty.EASY:
            move = self._random_choice(_available_moves(board))
        elif self.difficulty == Difficulty.MEDIUM:
            move = self._get_medium_move(board, ai, human)
        else:
            move = self.engine.best_move(board, ai, human)

        logger.debug("%s (%s) plays %d", ai.value, self.difficulty.value, move)
        return move

    def _random_choice(self, moves: List[int]) -> int:
        return moves[int(self.rng.integers(len(moves)))]

    def _get_medium_move(self, board: Board, ai: Player, human: Player) -> int:
        """Win, block, center, corner, then edge."""
        move = find_winning_move(board, ai)
        if move is not None:
            logger.debug("Medium: winning at %d", move)
            return move

        move = find_winning_move(board, human)
        if move is not None:
            logger.debug("Medium: blocking at %d", move)
            return move

        if board[CENTER] is None:
            return CENTER

        corners = [index for index in CORNERS if board[index] is None]
        if corners:
            return self._random_choice(corners)

        return self._random_choice(_available_moves(board))


def choose_move(
    board: Sequence,
    difficulty: Union[Difficulty, str],
    ai_player: Union[Player, str],
    human_player: Union[Player, str],
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Pick the AI's move at the given difficulty."""
    return AIPlayer(difficulty, rng).choose_move(board, ai_player, human_player)
