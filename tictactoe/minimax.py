"""
Minimax search for the hard AI.
Exhaustive game-tree search with alpha-beta pruning and depth-aware scoring.
"""

import logging
from typing import NamedTuple, Optional, Sequence, Union

from .board import Board, Player, place
from .config import AIConfig
from .errors import InvalidStateError
from .move_generator import CENTER, _available_moves, _is_full
from .move_validator import validate_ai_request
from .win_checker import _has_won, is_terminal

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    """Outcome of a root search."""
    move: int
    score: int
    nodes: int


class MinimaxEngine:
    """
    Chooses moves by minimax with alpha-beta pruning.

    A win found at depth d scores WIN_SCORE - d and a loss d - WIN_SCORE,
    so the engine prefers the fastest win and the slowest loss. Among
    equally scored moves the lowest index wins. Pruning never changes the
    result; prune=False runs the plain minimax over the same tree.
    """

    def __init__(self, prune: bool = True, open_with_center: Optional[bool] = None):
        """
        Initialize the engine.

        Args:
            prune: Apply alpha-beta cutoffs.
            open_with_center: Play the center on an empty board
                (default: AIConfig.OPEN_WITH_CENTER).
        """
        self.prune = prune
        self.open_with_center = (
            AIConfig.OPEN_WITH_CENTER if open_with_center is None else open_with_center
        )

        # Keep track of how many positions we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def best_move(
        self,
        board: Sequence,
        ai_player: Union[Player, str],
        human_player: Union[Player, str],
    ) -> int:
        """
        Get the best move for ai_player.

        On an empty board this plays the center when open_with_center is
        set, while search() would return 0 (every opening scores 0).

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
        self.nodes_evaluated = 0

        if self.open_with_center and all(cell is None for cell in board):
            logger.debug("Empty board, %s opens in the center", ai.value)
            return CENTER

        result = self.search(board, ai, human)
        logger.debug(
            "%s evaluated %d positions. Best move: %d (score: %d)",
            ai.value, result.nodes, result.move, result.score,
        )
        return result.move

    def search(self, board: Board, ai: Player, human: Player) -> SearchResult:
        """
        Score every candidate move and keep the strictly best one.

        Each root child gets a fresh alpha/beta window, so its score is
        exact whether or not pruning is enabled.
        """
        if is_terminal(board):
            raise InvalidStateError("No move to compute on a terminal board")

        self.nodes_evaluated = 0
        best_score = float("-inf")
        best_move = None

        for move in _available_moves(board):
            child = place(board, move, ai)
            score = self._minimax(
                child, 1, False, float("-inf"), float("inf"), ai, human
            )

            if score > best_score:
                best_score = score
                best_move = move

        return SearchResult(best_move, best_score, self.nodes_evaluated)

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float,
        ai: Player,
        human: Player,
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root.
            is_maximizing: True if it is the AI's turn.
            alpha: Best score the maximizer can already force.
            beta: Best score the minimizer can already force.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        if _has_won(board, ai):
            return AIConfig.WIN_SCORE - depth
        if _has_won(board, human):
            return depth - AIConfig.WIN_SCORE
        if _is_full(board):
            return 0

        moves = _available_moves(board)
        if not moves:
            raise InvalidStateError("Non-terminal board without moves")

        if is_maximizing:
            max_score = float("-inf")
            for move in moves:
                score = self._minimax(
                    place(board, move, ai), depth + 1, False, alpha, beta, ai, human
                )
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    break  # Beta cutoff
            return max_score
        else:
            min_score = float("inf")
            for move in moves:
                score = self._minimax(
                    place(board, move, human), depth + 1, True, alpha, beta, ai, human
                )
                min_score = min(min_score, score)
                beta = min(beta, score)
                if self.prune and beta <= alpha:
                    break  # Alpha cutoff
            return min_score
