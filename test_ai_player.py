"""
Tests for the AI difficulty levels.
"""

import numpy as np
import pytest

from tictactoe.ai_player import AIPlayer, Difficulty, choose_move, find_winning_move
from tictactoe.board import Player, empty_board, to_board
from tictactoe.errors import InvalidArgumentError, InvalidStateError
from tictactoe.move_generator import CORNERS, EDGES, available_moves

X, O = Player.X, Player.O


class FixedRng:
    """Stand-in random source that always picks the same position."""

    def __init__(self, pick):
        self.pick = pick
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        return self.pick(high)


FIRST = FixedRng(lambda high: 0)
LAST = FixedRng(lambda high: high - 1)


@pytest.mark.parametrize("value, expected", [
    ("easy", Difficulty.EASY),
    ("Medium", Difficulty.MEDIUM),
    (" HARD ", Difficulty.HARD),
    (Difficulty.HARD, Difficulty.HARD),
])
def test_difficulty_parse(value, expected):
    assert Difficulty.parse(value) == expected


@pytest.mark.parametrize("value", ["impossible", "", None, 3])
def test_difficulty_parse_rejects_unknown(value):
    with pytest.raises(InvalidArgumentError):
        Difficulty.parse(value)


def test_unknown_difficulty_is_rejected_by_player():
    with pytest.raises(InvalidArgumentError):
        AIPlayer("extreme")


def test_default_player_is_medium_with_numpy_rng():
    player = AIPlayer()
    assert player.difficulty == Difficulty.MEDIUM
    assert isinstance(player.rng, np.random.Generator)


def test_find_winning_move():
    board = to_board("XX_OO____")
    assert find_winning_move(board, O) == 5
    assert find_winning_move(board, X) == 2
    assert find_winning_move(empty_board(), X) is None


def test_find_winning_move_takes_first_index():
    # O can complete the top row at 2 or the bottom row at 8
    board = to_board("OO_XX_OO_")
    assert find_winning_move(board, O) == 2
    assert find_winning_move(board, X) == 5


def test_easy_picks_from_available_moves():
    board = to_board("X___O___X")
    player = AIPlayer("easy", np.random.default_rng(7))
    for _ in range(20):
        assert player.choose_move(board, O, X) in available_moves(board)


def test_easy_uses_injected_rng():
    board = to_board("X___O___X")
    assert AIPlayer("easy", FIRST).choose_move(board, O, X) == 1
    assert AIPlayer("easy", LAST).choose_move(board, O, X) == 7


def test_easy_is_reproducible_with_seed():
    board = empty_board()
    first = [AIPlayer("easy", np.random.default_rng(3)).choose_move(board, X, O) for _ in range(3)]
    second = [AIPlayer("easy", np.random.default_rng(3)).choose_move(board, X, O) for _ in range(3)]
    assert first == second


def test_medium_prefers_win_over_block():
    assert choose_move(to_board("XX_OO____"), "medium", O, X, rng=FIRST) == 5


def test_medium_blocks():
    assert choose_move(to_board("XX_______"), "medium", O, X, rng=FIRST) == 2


def test_medium_takes_center():
    assert choose_move(to_board("X________"), "medium", O, X, rng=FIRST) == 4


def test_medium_takes_random_corner():
    board = to_board("____X____")
    assert choose_move(board, "medium", O, X, rng=FIRST) == 0
    assert choose_move(board, "medium", O, X, rng=LAST) == 8

    seeded = AIPlayer("medium", np.random.default_rng(11))
    for _ in range(10):
        assert seeded.choose_move(board, O, X) in CORNERS


def test_medium_falls_back_to_edges():
    # Center and corners taken, nobody can win in one move
    board = to_board("O_XXXOO_X")
    assert choose_move(board, "medium", O, X, rng=FIRST) == 1
    assert choose_move(board, "medium", O, X, rng=LAST) == 7
    assert choose_move(board, "medium", O, X, rng=np.random.default_rng(1)) in EDGES


def test_medium_does_not_use_rng_for_rule_moves():
    rng = FixedRng(lambda high: 0)
    choose_move(to_board("XX_______"), "medium", O, X, rng=rng)
    assert rng.calls == []


def test_hard_delegates_to_minimax():
    assert choose_move(empty_board(), "hard", O, X) == 4
    assert choose_move(to_board("XX_OO____"), Difficulty.HARD, O, X) == 5
    assert choose_move(to_board("XX__O____"), Difficulty.HARD, O, X) == 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_board_is_not_modified(difficulty):
    board = ["X", "", "", "", "O", "", "", "", "X"]
    before = list(board)
    move = choose_move(board, difficulty, "O", "X", rng=np.random.default_rng(0))
    assert board == before
    assert 0 <= move <= 8
    assert board[move] == ""


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("cells", ["XXXOO____", "XOXXOOOXX"])
def test_terminal_board_is_rejected(difficulty, cells):
    with pytest.raises(InvalidStateError):
        choose_move(to_board(cells), difficulty, O, X, rng=FIRST)


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("ai, human", [(O, O), ("Z", X), (O, "")])
def test_bad_symbols_are_rejected(difficulty, ai, human):
    with pytest.raises(InvalidArgumentError):
        choose_move(empty_board(), difficulty, ai, human, rng=FIRST)


def test_bad_board_is_rejected():
    with pytest.raises(InvalidArgumentError):
        choose_move([None] * 10, "easy", O, X, rng=FIRST)
