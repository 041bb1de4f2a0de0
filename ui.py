"""
TicTacToe console UI.
Everything the game prints or reads goes through here.

Shows:
- The board, with empty squares numbered 1-9
- Prompts for game mode, mark and moves
- Computer moves and the final result
"""

from enum import Enum
from typing import Callable

from logic.board import Board
from logic.config import GameConfig
from logic.marks import Mark, cell_to_pos
from logic.players import Player
from logic.session import GameSession


class GameMode(Enum):
    """Who is playing."""
    HUMAN_VS_HUMAN = 1
    HUMAN_VS_COMPUTER = 2


ROW_SEPARATOR = "---------"
RETRY_MESSAGE = "Oops, try again:"


class ConsoleUI:
    """
    Text front end for TicTacToe.

    Input and output functions are injectable so the UI can be driven
    from tests without a terminal.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[..., None] = print
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def say(self, message: str = "") -> None:
        self.output_fn(message)

    # ---- board ----

    def render_board(self, board: Board) -> str:
        """
        Render the board as text.

        Empty squares show their own position number, which is worked
        out from the row and column here rather than stored on the board.
        """
        lines = []
        for row, cells in enumerate(board.rows()):
            labels = []
            for col, cell in enumerate(cells):
                mark = cell.mark
                labels.append(str(mark) if mark else str(cell_to_pos(row, col)))
            lines.append(" | ".join(labels))
        return f"\n{ROW_SEPARATOR}\n".join(lines)

    def show_board(self, board: Board) -> None:
        self.say(self.render_board(board))

    # ---- prompts ----

    def ask_mode(self) -> GameMode:
        """Ask for human vs human or human vs computer."""
        self.say("Welcome to Tic-Tac-Toe!")
        self.say("Please make a selection:")
        self.say("1 - Play against another human")
        self.say("2 - Play against the computer")

        while True:
            answer = self.input_fn("").strip()
            if answer in ("1", "2"):
                self.say()
                return GameMode(int(answer))
            self.say(RETRY_MESSAGE)

    def ask_mark(self) -> Mark:
        """Ask which mark the human wants to play."""
        self.say(f"Would you like to be {Mark.X} or {Mark.O}?")
        self.say(f"({Mark.X} gets to go first.)")

        while True:
            try:
                mark = Mark.parse(self.input_fn(""))
            except ValueError:
                self.say(RETRY_MESSAGE)
                continue
            self.say()
            return mark

    def read_move(self, player_name: str, mark: Mark) -> int:
        """
        Read a position from the keyboard.

        Only checks that the answer is a number; HumanPlayer keeps
        asking until the number is a legal move.
        """
        while True:
            answer = self.input_fn(f"{player_name} ({mark}), enter your move (1-9): ")
            self.say()
            try:
                return int(answer.strip())
            except ValueError:
                self.say(f"'{answer.strip()}' is not a number. "
                         f"Pick a square from {GameConfig.FIRST_POSITION} to {GameConfig.LAST_POSITION}.")

    def ask_play_again(self) -> bool:
        answer = self.input_fn("Play again? (y/n): ")
        return answer.strip().lower().startswith("y")

    # ---- announcements ----

    def announce_move(self, player: Player, pos: int) -> None:
        self.say(f"{player.name} placed its {player.mark} on spot {pos}.")
        self.say()

    def announce_result(self, session: GameSession) -> None:
        """Print the final board and who won."""
        self.show_board(session.board)

        winner = session.winner()
        if winner is not None:
            self.say(f"{winner.name} ({winner.mark}) has won!")
        elif session.outcome().is_tie:
            self.say("It was a tie! How boring!")
        else:
            self.say("The game was not finished.")
