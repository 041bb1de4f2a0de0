"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, rules, minimax AI, game session)
- UI (console prompts and board printing)

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
import logging
import random
import sys
from typing import Optional

from logic.board import Board
from logic.config import GameConfig
from logic.marks import Mark
from logic.players import Difficulty, HumanPlayer, Player, make_computer_player
from logic.session import GameSession
from logic.win_checker import Outcome
from ui import ConsoleUI, GameMode

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Main controller for console TicTacToe.

    Game flow:
    1. Pick a mode (and a mark, against the computer)
    2. Players take turns; humans type 1-9, the computer searches
    3. Print the result and offer a rematch
    """

    def __init__(
        self,
        ui: ConsoleUI,
        mode: Optional[GameMode] = None,
        human_mark: Optional[Mark] = None,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the game.

        Args:
            ui: Console front end.
            mode: Game mode, or None to ask.
            human_mark: The human's mark against the computer, or None to ask.
            difficulty: How strong the computer plays.
            rng: Random source for the computer.
        """
        self.ui = ui
        self.mode = mode
        self.human_mark = human_mark
        self.difficulty = difficulty
        self.rng = rng
        self.session: Optional[GameSession] = None

    def start(self) -> Outcome:
        """Set up the session and play until the player stops."""
        if self.mode is None:
            self.mode = self.ui.ask_mode()

        self.session = self._create_session()

        while True:
            outcome = self._play_round()
            if not self.ui.ask_play_again():
                return outcome
            self.session.reset()

    def _create_session(self) -> GameSession:
        """Build the two players for the chosen mode."""
        board = Board.new()

        if self.mode == GameMode.HUMAN_VS_HUMAN:
            players = (
                self._human(GameConfig.PLAYER_ONE_NAME, Mark.X),
                self._human(GameConfig.PLAYER_TWO_NAME, Mark.O),
            )
            return GameSession(players=players, board=board)

        if self.human_mark is None:
            self.human_mark = self.ui.ask_mark()

        human = self._human(GameConfig.HUMAN_NAME, self.human_mark)
        computer = make_computer_player(
            self.difficulty,
            GameConfig.COMPUTER_NAME,
            self.human_mark.opposite(),
            self.rng
        )
        logger.debug("Human plays %s, computer plays %s (%s)",
                     human.mark, computer.mark, self.difficulty.value)

        players = (human, computer) if human.mark == Mark.X else (computer, human)
        return GameSession(players=players, board=board)

    def _human(self, name: str, mark: Mark) -> HumanPlayer:
        return HumanPlayer(name, mark, self._read_human_move, on_reject=self.ui.say)

    def _read_human_move(self, name: str, mark: Mark) -> int:
        """Show the board, then ask the human for a square."""
        self.ui.show_board(self.session.board)
        return self.ui.read_move(name, mark)

    def _on_turn(self, player: Player, pos: int) -> None:
        if not isinstance(player, HumanPlayer):
            self.ui.announce_move(player, pos)

    def _play_round(self) -> Outcome:
        outcome = self.session.run(on_turn=self._on_turn)
        self.ui.announce_result(self.session)
        return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--mode",
        choices=["human", "computer"],
        help="Opponent type (asked interactively if omitted)"
    )
    parser.add_argument(
        "--mark",
        choices=["X", "O", "x", "o"],
        help="Your mark against the computer; X goes first"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.HARD.value,
        help="easy = random moves, hard = minimax (default: hard)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output (AI search statistics)"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=GameConfig.VERBOSE_LOG_LEVEL if args.verbose else GameConfig.DEFAULT_LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    mode = None
    if args.mode == "human":
        mode = GameMode.HUMAN_VS_HUMAN
    elif args.mode == "computer":
        mode = GameMode.HUMAN_VS_COMPUTER

    game = TicTacToeGame(
        ui=ConsoleUI(),
        mode=mode,
        human_mark=Mark.parse(args.mark) if args.mark else None,
        difficulty=Difficulty(args.difficulty),
        rng=random.Random(args.seed) if args.seed is not None else None
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
