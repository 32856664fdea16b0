"""
Console TicTacToe.

Play against another person (pvp) or against the computer (ai) at
easy, medium or hard difficulty. Moves are entered as "row col" (0-2)
or as a single cell number 1-9, numbered left to right, top to bottom.

    python main.py --mode ai --difficulty hard
    python main.py --self-play 10
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

import numpy as np

from tictactoe.ai_player import AIPlayer, Difficulty
from tictactoe.board import Player, coords_to_index, index_to_coords
from tictactoe.config import AIConfig, setup_logging
from tictactoe.errors import InvalidArgumentError, InvalidMoveError
from tictactoe.game_state import GameState


MODES = ("pvp", "ai")


def parse_move(text: str) -> int:
    """
    Parse a move typed by a player.

    Accepts "row col" with 0-based coordinates or a single cell number 1-9.

    Returns:
        Cell index (0-8).

    Raises:
        InvalidArgumentError: If the text is not a position on the board.
    """
    parts = text.replace(",", " ").split()
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise InvalidArgumentError(f"Not a move: {text!r}") from None

    if len(numbers) == 2:
        return coords_to_index(numbers[0], numbers[1])
    if len(numbers) == 1 and 1 <= numbers[0] <= 9:
        return numbers[0] - 1
    raise InvalidArgumentError(f"Not a move: {text!r}. Use 'row col' or 1-9.")


class TicTacToeGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The player whose turn it is enters a move (or the AI picks one)
    2. The move is validated and applied
    3. Repeat until someone wins or it's a draw
    4. The session tally is updated and printed
    """

    def __init__(
        self,
        mode: str = "ai",
        difficulty: str = AIConfig.DEFAULT_DIFFICULTY,
        human_player: Player = Player.X,
        rng: Optional[np.random.Generator] = None,
        input_fn: Callable[[str], str] = input,
    ):
        if mode not in MODES:
            raise InvalidArgumentError(f"Invalid mode: {mode!r}. Must be one of: {', '.join(MODES)}")

        self.mode = mode
        self.human_player = human_player
        self.ai_player = human_player.opposite()
        self.ai = AIPlayer(difficulty, rng)
        self.input_fn = input_fn
        self.game_state = GameState()
        self.scores: Dict[str, int] = {"X": 0, "O": 0, "draws": 0}

    def _is_ai_turn(self) -> bool:
        return self.mode == "ai" and self.game_state.current_player == self.ai_player

    def play_round(self) -> Optional[GameState]:
        """
        Play one game from an empty board.

        Returns:
            The finished game, or None if the player quit.
        """
        self.game_state.reset()
        print("\n" + self.game_state.format())

        while not self.game_state.is_game_over:
            if self._is_ai_turn():
                self._ai_turn()
            elif not self._human_turn():
                return None
            print("\n" + self.game_state.format())

        self._record_result()
        return self.game_state

    def _ai_turn(self):
        """Let the computer move."""
        print(f"\n>>> AI ({self.ai.difficulty.value}) is thinking...")
        move = self.ai.choose_move(
            self.game_state.snapshot(), self.ai_player, self.human_player
        )
        row, col = index_to_coords(move)
        print(f">>> AI plays {self.ai_player.value} at ({row}, {col})")
        self.game_state.make_move(row, col)

    def _human_turn(self) -> bool:
        """
        Read moves until a legal one is made.

        Returns:
            False if the player asked to quit.
        """
        player = self.game_state.current_player.value
        while True:
            text = self.input_fn(f"{player} to move (row col, 1-9, q to quit): ").strip()
            if text.lower() in ("q", "quit", "exit"):
                return False
            try:
                self.game_state.make_move_at(parse_move(text))
                return True
            except (InvalidArgumentError, InvalidMoveError) as exc:
                print(f"Invalid move: {exc}")

    def _record_result(self):
        if self.game_state.winner is not None:
            self.scores[self.game_state.winner.value] += 1
        else:
            self.scores["draws"] += 1

    def print_scores(self):
        print(
            f"Score  X: {self.scores['X']}  O: {self.scores['O']}  "
            f"Draws: {self.scores['draws']}"
        )


def run_self_play(games: int) -> List[GameState]:
    """Play hard AI against hard AI and return the finished games."""
    ai = AIPlayer(Difficulty.HARD)
    results = []
    for _ in range(games):
        game = GameState()
        while not game.is_game_over:
            player = game.current_player
            game.make_move_at(ai.choose_move(game.snapshot(), player, player.opposite()))
        results.append(game)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="ai",
        help="pvp: two people at one keyboard, ai: play the computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=AIConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty"
    )
    parser.add_argument(
        "--human",
        choices=[p.value for p in Player],
        default="X",
        help="Your mark in ai mode (X moves first)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=AIConfig.RANDOM_SEED,
        help="Seed for the easy/medium AI"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=1,
        help="Number of games to play"
    )
    parser.add_argument(
        "--self-play",
        type=int,
        metavar="N",
        help="Play N hard-vs-hard games; fails unless all are draws"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    if args.self_play is not None:
        games = run_self_play(args.self_play)
        not_drawn = [game for game in games if not game.is_draw]
        print(f"Self-play: {len(games)} games, {len(games) - len(not_drawn)} draws")
        return 1 if not_drawn else 0

    game = TicTacToeGame(
        mode=args.mode,
        difficulty=args.difficulty,
        human_player=Player.parse(args.human),
        rng=np.random.default_rng(args.seed),
        input_fn=input_fn,
    )

    print("\n" + "=" * 40)
    print("   TicTacToe")
    print("=" * 40)
    if args.mode == "ai":
        print(f"   You play: {game.human_player.value}  AI: {args.difficulty}")

    try:
        for _ in range(args.rounds):
            if game.play_round() is None:
                break
            game.print_scores()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
