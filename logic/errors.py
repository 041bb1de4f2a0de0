"""
Exceptions raised when a game session is driven incorrectly.

The board itself never raises for an illegal move; see Board.place.
"""


class TicTacToeError(Exception):
    """Base class for game errors."""


class GameOverError(TicTacToeError):
    """A turn was requested after the game already ended."""


class IllegalMoveError(TicTacToeError):
    """A player returned a move the board does not accept."""

    def __init__(self, player_name: str, position: int, reason: str):
        super().__init__(f"{player_name} chose illegal move {position}: {reason}")
        self.player_name = player_name
        self.position = position
        self.reason = reason
