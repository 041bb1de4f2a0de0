"""
Tests for players, the game session and the console front end.
Run with pytest.
"""

import random

import pytest

import main
from logic.board import Board
from logic.errors import GameOverError, IllegalMoveError
from logic.marks import Mark
from logic.players import (
    ComputerPlayer, Difficulty, HumanPlayer, RandomPlayer, make_computer_player
)
from logic.session import GameSession
from ui import ConsoleUI, GameMode, RETRY_MESSAGE

X, O = Mark.X, Mark.O


class ScriptedPlayer:
    """Plays a fixed list of moves."""

    def __init__(self, name, mark, moves):
        self.name = name
        self.mark = mark
        self.moves = list(moves)

    def select_move(self, board):
        return self.moves.pop(0)


class FakeConsole:
    """Feeds canned answers to ConsoleUI and records what it prints."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def print(self, message=""):
        self.lines.append(message)

    def ui(self) -> ConsoleUI:
        return ConsoleUI(input_fn=self.input, output_fn=self.print)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def scripted_session(x_moves, o_moves) -> GameSession:
    return GameSession(players=(
        ScriptedPlayer("Player 1", X, x_moves),
        ScriptedPlayer("Player 2", O, o_moves),
    ))


# ==================== PLAYERS ====================

def test_human_player_retries_until_legal():
    board = Board.from_moves([(X, 1)])
    answers = iter([0, 12, 1, 4])
    human = HumanPlayer("Player 2", O, lambda name, mark: next(answers))

    assert human.select_move(board) == 4


def test_human_player_reports_why_a_move_was_refused():
    board = Board.from_moves([(X, 1)])
    answers = iter([1, 10, 4])
    reasons = []
    human = HumanPlayer("Player 2", O, lambda name, mark: next(answers), on_reject=reasons.append)

    assert human.select_move(board) == 4
    assert len(reasons) == 2
    assert "already taken by X" in reasons[0]
    assert "Must be 1-9" in reasons[1]


def test_computer_player_uses_engine():
    board = Board.from_moves([(X, 1), (O, 4), (X, 2), (O, 5)])
    computer = ComputerPlayer("Computer", X)
    assert computer.select_move(board) == 3


def test_random_player_picks_legal_moves():
    board = Board.from_moves([(X, 1), (O, 2), (X, 3)])
    player = RandomPlayer("Computer", O, random.Random(4))
    for _ in range(20):
        assert player.select_move(board) in board.legal_moves()


def test_random_player_on_full_board():
    board = Board.from_moves([
        (X, 1), (O, 2), (X, 3), (O, 4), (X, 6), (O, 5), (X, 8), (O, 9), (X, 7)
    ])
    assert RandomPlayer("Computer", O).select_move(board) is None


def test_make_computer_player_by_difficulty():
    assert isinstance(make_computer_player(Difficulty.EASY, "C", O), RandomPlayer)
    hard = make_computer_player(Difficulty.HARD, "C", O, random.Random(1))
    assert isinstance(hard, ComputerPlayer)
    assert hard.mark == O


# ==================== SESSION ====================

def test_session_alternates_x_then_o():
    session = scripted_session([1, 2], [5])
    assert session.current_player.mark == X
    session.play_turn()
    assert session.current_player.mark == O
    session.play_turn()
    assert session.current_player.mark == X


def test_session_runs_until_win():
    session = scripted_session([1, 2, 3], [4, 5])
    seen = []

    outcome = session.run(on_turn=lambda player, pos: seen.append((player.mark, pos)))

    assert outcome.winner == X
    assert session.winner().name == "Player 1"
    assert seen == [(X, 1), (O, 4), (X, 2), (O, 5), (X, 3)]


def test_session_runs_until_tie():
    session = scripted_session([1, 3, 6, 8, 7], [2, 4, 5, 9])
    outcome = session.run()
    assert outcome.is_tie
    assert session.winner() is None


def test_session_rejects_illegal_move():
    session = scripted_session([5, 5], [5])
    session.play_turn()

    with pytest.raises(IllegalMoveError) as excinfo:
        session.play_turn()

    assert excinfo.value.position == 5
    assert "already taken" in excinfo.value.reason
    assert session.board.mark_count() == 1


def test_session_refuses_turn_after_game_over():
    session = scripted_session([1, 2, 3], [4, 5])
    session.run()
    with pytest.raises(GameOverError):
        session.play_turn()


def test_session_requires_x_first():
    with pytest.raises(ValueError):
        GameSession(players=(
            ScriptedPlayer("A", O, []),
            ScriptedPlayer("B", X, []),
        ))


def test_session_reset_starts_over():
    session = scripted_session([1, 2, 3], [4, 5])
    session.run()
    session.reset()
    assert session.board.is_empty()
    assert not session.is_over()


def test_computer_never_loses_to_random_player():
    for seed in range(3):
        rng = random.Random(seed)
        session = GameSession(players=(
            RandomPlayer("Random", X, rng),
            ComputerPlayer("Computer", O),
        ))
        assert session.run().winner != X


# ==================== CONSOLE UI ====================

def test_render_empty_board_shows_positions():
    ui = ConsoleUI()
    assert ui.render_board(Board.new()) == (
        "1 | 2 | 3\n"
        "---------\n"
        "4 | 5 | 6\n"
        "---------\n"
        "7 | 8 | 9"
    )


def test_render_board_with_marks():
    board = Board.from_moves([(X, 1), (O, 5), (X, 9)])
    assert ConsoleUI().render_board(board) == (
        "X | 2 | 3\n"
        "---------\n"
        "4 | O | 6\n"
        "---------\n"
        "7 | 8 | X"
    )


def test_ask_mode_retries_on_bad_input():
    console = FakeConsole(["3", "abc", "2"])
    assert console.ui().ask_mode() == GameMode.HUMAN_VS_COMPUTER
    assert console.lines.count(RETRY_MESSAGE) == 2


def test_ask_mark_accepts_lowercase():
    console = FakeConsole(["y", "o"])
    assert console.ui().ask_mark() == O
    assert RETRY_MESSAGE in console.lines


def test_read_move_retries_on_non_numbers():
    console = FakeConsole(["five", " 5 "])
    assert console.ui().read_move("Player 1", X) == 5
    assert console.prompts[0] == "Player 1 (X), enter your move (1-9): "
    assert "'five' is not a number" in console.text


def test_ask_play_again():
    assert FakeConsole(["Y"]).ui().ask_play_again()
    assert not FakeConsole(["n"]).ui().ask_play_again()


def test_announce_result_messages():
    console = FakeConsole([])
    session = scripted_session([1, 2, 3], [4, 5])
    session.run()
    console.ui().announce_result(session)
    assert "Player 1 (X) has won!" in console.lines

    console = FakeConsole([])
    session = scripted_session([1, 3, 6, 8, 7], [2, 4, 5, 9])
    session.run()
    console.ui().announce_result(session)
    assert "It was a tie! How boring!" in console.lines


# ==================== CONTROLLER ====================

def test_human_vs_human_game():
    console = FakeConsole(["1", "4", "2", "5", "3", "n"])
    game = main.TicTacToeGame(console.ui(), mode=GameMode.HUMAN_VS_HUMAN)

    outcome = game.start()

    assert outcome.winner == X
    assert "Player 1 (X) has won!" in console.lines


def test_rejected_moves_are_explained():
    console = FakeConsole(["1", "1", "10", "4", "2", "5", "3", "n"])
    game = main.TicTacToeGame(console.ui(), mode=GameMode.HUMAN_VS_HUMAN)

    outcome = game.start()

    assert outcome.winner == X
    assert "Position 1 is already taken by X." in console.lines
    assert "Invalid position 10. Must be 1-9." in console.lines


def test_human_vs_computer_from_menu():
    """The human walks through squares 1-9 in order; the computer must not lose."""
    answers = ["2", "x"] + [str(p) for p in range(1, 10)] * 10
    console = FakeConsole(answers)
    game = main.TicTacToeGame(console.ui(), rng=random.Random(5))

    outcome = game.start()

    assert game.mode == GameMode.HUMAN_VS_COMPUTER
    assert game.human_mark == X
    assert outcome.is_over
    assert outcome.winner != X
    assert any("Computer placed its O on spot" in line for line in console.lines)


def test_computer_moves_first_when_human_is_o():
    answers = [str(p) for p in range(1, 10)] * 10
    console = FakeConsole(answers)
    game = main.TicTacToeGame(
        console.ui(),
        mode=GameMode.HUMAN_VS_COMPUTER,
        human_mark=O,
        rng=random.Random(2)
    )

    outcome = game.start()

    assert game.session.players[0].name == "Computer"
    assert outcome.winner != O
    assert console.lines[0].startswith("Computer placed its X on spot")


def test_rematch_resets_the_board():
    console = FakeConsole(["1", "4", "2", "5", "3", "y", "4", "1", "5", "2", "6", "n"])
    game = main.TicTacToeGame(console.ui(), mode=GameMode.HUMAN_VS_HUMAN)

    outcome = game.start()

    assert outcome.winner == X
    assert outcome.line == (4, 5, 6)


def test_parser_defaults_and_options():
    parser = main.build_parser()

    args = parser.parse_args([])
    assert args.mode is None
    assert args.difficulty == "hard"
    assert not args.verbose

    args = parser.parse_args(["--mode", "computer", "--mark", "o", "--difficulty", "easy", "--seed", "3"])
    assert args.mode == "computer"
    assert args.mark == "o"
    assert args.difficulty == "easy"
    assert args.seed == 3
