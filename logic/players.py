"""
Players for TicTacToe.

Every player answers one question: given this board, where do I go?
Humans answer through a read_move callable supplied by the front end,
computers through the minimax AI or a random pick.
"""

import random
from enum import Enum
from typing import Callable, Optional, Protocol

from .ai_player import AIPlayer
from .board import Board
from .marks import Mark


class Player(Protocol):
    """Anything that can take a turn."""
    name: str
    mark: Mark

    def select_move(self, board: Board) -> int:
        ...


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"    # Random moves
    HARD = "hard"    # Full minimax


class HumanPlayer:
    """
    A player whose moves come from outside, usually the keyboard.

    `read_move(name, mark)` is asked again until it returns a legal
    position for the current board. Each rejected answer is passed to
    `on_reject` with the reason it was refused.
    """

    def __init__(
        self,
        name: str,
        mark: Mark,
        read_move: Callable[[str, Mark], int],
        on_reject: Optional[Callable[[str], None]] = None
    ):
        self.name = name
        self.mark = mark
        self.read_move = read_move
        self.on_reject = on_reject

    def select_move(self, board: Board) -> int:
        while True:
            pos = self.read_move(self.name, self.mark)
            result = board.check_move(self.mark, pos)
            if result.is_valid:
                return pos
            if self.on_reject is not None:
                self.on_reject(result.error_message)

    def __repr__(self) -> str:
        return f"HumanPlayer({self.name!r}, {self.mark})"


class ComputerPlayer:
    """A player that asks the minimax AI for every move."""

    def __init__(self, name: str, mark: Mark, engine: Optional[AIPlayer] = None):
        self.name = name
        self.mark = mark
        self.engine = engine if engine is not None else AIPlayer()

    def select_move(self, board: Board) -> int:
        return self.engine.choose_move(board, self.mark)

    def __repr__(self) -> str:
        return f"ComputerPlayer({self.name!r}, {self.mark})"


class RandomPlayer:
    """A player that picks any legal move at random."""

    def __init__(self, name: str, mark: Mark, rng: Optional[random.Random] = None):
        self.name = name
        self.mark = mark
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board) -> Optional[int]:
        moves = board.legal_moves()
        return self.rng.choice(moves) if moves else None

    def __repr__(self) -> str:
        return f"RandomPlayer({self.name!r}, {self.mark})"


def make_computer_player(
    difficulty: Difficulty,
    name: str,
    mark: Mark,
    rng: Optional[random.Random] = None
) -> Player:
    """
    Build the computer opponent for a difficulty level.

    Args:
        difficulty: EASY for random moves, HARD for minimax.
        name: Display name.
        mark: The computer's mark.
        rng: Optional random source, shared with the AI.
    """
    if difficulty == Difficulty.EASY:
        return RandomPlayer(name, mark, rng)
    return ComputerPlayer(name, mark, AIPlayer(rng))
