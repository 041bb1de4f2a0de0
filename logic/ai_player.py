"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
import random
from typing import List, Optional

from .board import Board
from .config import GameConfig
from .marks import Mark

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is exhaustive: no pruning and no caching. It tries moves
    on the caller's board and undoes each one, so the board is unchanged
    when choose_move() returns. Only the random source and the last
    search's statistics outlive a call.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            rng: Random source used for the opening move and for picking
                between equally good moves. Anything with a choice()
                method works; tests pass a seeded Random or a stub.
        """
        self.rng = rng if rng is not None else random.Random()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, board: Board, mark: Mark) -> Optional[int]:
        """
        Get the best move for `mark` in the current position.

        Args:
            board: Current board. Borrowed for the search and restored.
            mark: The mark the AI is playing.

        Returns:
            Position (1-9) of the best move, or None if no moves available.
        """
        self.positions_evaluated = 0
        valid_moves = board.legal_moves()

        if not valid_moves:
            return None

        # Moving first: any opening is fine, so don't be predictable
        if len(valid_moves) == GameConfig.NUM_CELLS:
            move = self.rng.choice(valid_moves)
            logger.debug("Empty board, %s opens at random: %d", mark, move)
            return move

        best_score = None
        best_moves: List[int] = []

        for pos in valid_moves:
            board.place(mark, pos)
            try:
                score = self._minimax(board, mark, depth=1, is_maximizing=False)
            finally:
                board.undo(pos)

            if best_score is None or score > best_score:
                best_score = score
                best_moves = [pos]
            elif score == best_score:
                best_moves.append(pos)

        move = self.rng.choice(best_moves)
        logger.debug(
            "AI (%s) evaluated %d positions. Best moves: %s (score: %d), chose %d",
            mark, self.positions_evaluated, best_moves, best_score, move
        )
        return move

    def _minimax(self, board: Board, mark: Mark, depth: int, is_maximizing: bool) -> int:
        """
        Plain minimax.

        Args:
            board: Position to evaluate.
            mark: The AI's mark; scores are from its point of view.
            depth: Plies played since the root.
            is_maximizing: True if it is the AI's turn at this ply.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        outcome = board.outcome()
        if outcome.is_win:
            if outcome.winner == mark:
                return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
            return -GameConfig.WIN_SCORE + depth  # Loss (prefer slower losses)
        if outcome.is_tie:
            return GameConfig.TIE_SCORE

        to_move = mark if is_maximizing else mark.opposite()
        scores = []
        for pos in board.legal_moves():
            board.place(to_move, pos)
            try:
                scores.append(self._minimax(board, mark, depth + 1, not is_maximizing))
            finally:
                board.undo(pos)

        return max(scores) if is_maximizing else min(scores)


# Quick demo: the AI plays itself
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=GameConfig.LOG_FORMAT)

    ai = AIPlayer(random.Random(0))
    board = Board.new()
    mark = Mark.X

    while not board.outcome().is_over:
        move = ai.choose_move(board, mark)
        board.place(mark, move)
        print(f"{mark} -> {move}  {board!r}")
        mark = mark.opposite()

    print(f"Result: {board.outcome()}")
