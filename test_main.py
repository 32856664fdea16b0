"""
Tests for the console game.
"""

import numpy as np
import pytest

import main
from tictactoe.board import Player
from tictactoe.errors import InvalidArgumentError


def scripted(lines):
    """input() replacement that replays lines, then behaves like a closed stdin."""
    pending = list(lines)

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return fake_input


@pytest.mark.parametrize("text, index", [("1", 0), ("9", 8), ("0 0", 0), ("2 1", 7), ("1,2", 5)])
def test_parse_move(text, index):
    assert main.parse_move(text) == index


@pytest.mark.parametrize("text", ["", "abc", "0", "10", "3 3", "1 2 3"])
def test_parse_move_rejects_garbage(text):
    with pytest.raises(InvalidArgumentError):
        main.parse_move(text)


def test_pvp_game_until_win(capsys):
    code = main.main(["--mode", "pvp"], input_fn=scripted(["1", "4", "2", "5", "3"]))
    out = capsys.readouterr().out
    assert code == 0
    assert "X WINS!" in out
    assert "Score  X: 1  O: 0  Draws: 0" in out


def test_invalid_input_is_reprompted(capsys):
    code = main.main(
        ["--mode", "pvp"],
        input_fn=scripted(["hello", "1", "1", "4", "2", "5", "3"]),
    )
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("Invalid move") == 2
    assert "X WINS!" in out


def test_quit(capsys):
    code = main.main(["--mode", "pvp"], input_fn=scripted(["5", "q"]))
    out = capsys.readouterr().out
    assert code == 0
    assert "Goodbye!" in out
    assert "Score" not in out


def test_closed_input_ends_game(capsys):
    assert main.main(["--mode", "pvp"], input_fn=scripted(["5"])) == 0
    assert "interrupted" in capsys.readouterr().out


def test_hard_ai_does_not_lose_to_scripted_player(capsys):
    # Always try the lowest free cell; occupied cells are re-prompted
    lines = [str(n) for n in range(1, 10)]
    code = main.main(["--difficulty", "hard", "--human", "X"], input_fn=scripted(lines))
    out = capsys.readouterr().out
    assert code == 0
    assert "X WINS!" not in out
    assert "O WINS!" in out or "DRAW" in out


def test_ai_moves_first_when_human_is_o():
    game = main.TicTacToeGame(
        mode="ai",
        difficulty="hard",
        human_player=Player.O,
        input_fn=scripted(["q"]),
    )
    assert game.play_round() is None
    assert game.game_state.get_cell(1, 1) == Player.X
    assert game.game_state.move_count == 1


def test_bad_mode_is_rejected():
    with pytest.raises(InvalidArgumentError):
        main.TicTacToeGame(mode="online", rng=np.random.default_rng(0))


def test_self_play_draws(capsys):
    assert main.main(["--self-play", "2"]) == 0
    assert "2 games, 2 draws" in capsys.readouterr().out


def test_run_self_play_games_are_complete():
    games = main.run_self_play(1)
    assert len(games) == 1
    assert games[0].is_draw
    assert games[0].move_count == 9
