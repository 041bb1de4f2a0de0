"""
Win checker for TicTacToe.
Works out whether a grid is won, tied or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .marks import Cell, Mark


class OutcomeStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    """
    The result of a board at one moment.

    `winner` and `line` are only set for a WIN.
    """
    status: OutcomeStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def tie(cls) -> "Outcome":
        return cls(OutcomeStatus.TIE)

    @classmethod
    def win(cls, mark: Mark, line: Optional[Tuple[int, int, int]] = None) -> "Outcome":
        return cls(OutcomeStatus.WIN, winner=mark, line=line)

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status == OutcomeStatus.WIN

    @property
    def is_tie(self) -> bool:
        return self.status == OutcomeStatus.TIE

    def __str__(self) -> str:
        if self.is_win:
            return f"Win({self.winner})"
        return "Tie" if self.is_tie else "InProgress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row, column or diagonal.
    """

    # All possible winning lines as 1-9 positions.
    # Rows and columns interleave, diagonals come last; when more
    # than one line is complete the first one here is reported.
    WINNING_LINES = (
        (1, 2, 3),  # row 0
        (1, 4, 7),  # column 0
        (4, 5, 6),  # row 1
        (2, 5, 8),  # column 1
        (7, 8, 9),  # row 2
        (3, 6, 9),  # column 2
        (1, 5, 9),  # main diagonal
        (3, 5, 7),  # anti-diagonal
    )

    # Same lines as flat grid indices, for fancy indexing
    _LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp) - 1

    def check(self, grid: np.ndarray) -> Outcome:
        """
        Compute the outcome of a grid.

        Args:
            grid: The 3x3 cell grid.

        Returns:
            Win(mark) for the first completed line, Tie for a full grid
            with no line, InProgress otherwise.
        """
        flat = grid.ravel()
        lines = flat[self._LINE_INDEX]

        complete = (
            (lines[:, 0] != Cell.EMPTY)
            & (lines[:, 0] == lines[:, 1])
            & (lines[:, 1] == lines[:, 2])
        )
        hits = np.flatnonzero(complete)
        if hits.size:
            first = int(hits[0])
            mark = Cell(int(lines[first, 0])).mark
            return Outcome.win(mark, self.WINNING_LINES[first])

        if not (flat == Cell.EMPTY).any():
            return Outcome.tie()

        return Outcome.in_progress()
