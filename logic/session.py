"""
Game session for TicTacToe.
Holds the board and both players, and alternates turns.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .board import Board
from .errors import GameOverError, IllegalMoveError
from .marks import Mark
from .players import Player
from .win_checker import Outcome

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """
    One game between two players.

    Game flow:
    1. X (players[0]) picks a move
    2. The move is applied to the board
    3. The board is checked for a win or tie
    4. O (players[1]) moves, and so on until the game is over

    Whose turn it is comes from the board itself: X when an even
    number of marks are down, O otherwise.
    """

    players: Tuple[Player, Player]
    board: Board = field(default_factory=Board.new)

    def __post_init__(self):
        first, second = self.players
        if first.mark != Mark.X or second.mark != Mark.O:
            raise ValueError(
                f"players must be (X, O), got ({first.mark}, {second.mark})"
            )

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.board.mark_count() % 2]

    def outcome(self) -> Outcome:
        return self.board.outcome()

    def is_over(self) -> bool:
        return self.outcome().is_over

    def winner(self) -> Optional[Player]:
        """The winning player, or None for a tie or unfinished game."""
        outcome = self.outcome()
        if not outcome.is_win:
            return None
        return self.players[0] if outcome.winner == Mark.X else self.players[1]

    def play_turn(self) -> int:
        """
        Let the current player move.

        Returns:
            The position that was played.

        Raises:
            GameOverError: if the game has already ended.
            IllegalMoveError: if the player picked an illegal move.
        """
        if self.is_over():
            raise GameOverError(f"Game is already over: {self.outcome()}")

        player = self.current_player
        pos = player.select_move(self.board)

        result = self.board.check_move(player.mark, pos)
        if not result.is_valid:
            raise IllegalMoveError(player.name, pos, result.error_message)

        self.board.place(player.mark, pos)
        logger.debug("%s (%s) played %d", player.name, player.mark, pos)
        return pos

    def run(self, on_turn: Optional[Callable[[Player, int], None]] = None) -> Outcome:
        """
        Play turns until someone wins or the board fills up.

        Args:
            on_turn: Called with (player, pos) after every move.

        Returns:
            The final outcome.
        """
        while not self.is_over():
            player = self.current_player
            pos = self.play_turn()
            if on_turn is not None:
                on_turn(player, pos)

        outcome = self.outcome()
        logger.debug("Game finished: %s", outcome)
        return outcome

    def reset(self) -> None:
        """Clear the board for a new round."""
        self.board.reset()
