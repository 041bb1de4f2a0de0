"""
Board for TicTacToe.
Owns the 3x3 grid and enforces placement rules.
"""

import logging
from typing import Iterable, List, Tuple

import numpy as np

from .config import GameConfig
from .marks import Cell, Mark, is_position, pos_to_cell
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored as Cell values in an int8 numpy array. A cell only
    goes from EMPTY to a mark through place(); illegal placements are
    ignored rather than raised, so callers may check is_legal() first or
    simply call place() and look at the return value.
    """

    _validator = MoveValidator()
    _win_checker = WinChecker()

    def __init__(self):
        size = GameConfig.BOARD_SIZE
        self._grid = np.full((size, size), Cell.EMPTY, dtype=np.int8)

    @classmethod
    def new(cls) -> "Board":
        """Return an empty board."""
        return cls()

    @classmethod
    def from_moves(cls, moves: Iterable[Tuple[Mark, int]]) -> "Board":
        """
        Build a board by placing (mark, pos) pairs in order.

        Illegal pairs are skipped, same as place().
        """
        board = cls()
        for mark, pos in moves:
            board.place(mark, pos)
        return board

    # ---- rules ----

    def check_move(self, mark, pos) -> ValidationResult:
        """Validate a placement, with the reason when it is illegal."""
        return self._validator.validate_move(self._grid, mark, pos)

    def is_legal(self, mark, pos) -> bool:
        """True if `mark` may be placed at `pos` (1-9) right now."""
        return self.check_move(mark, pos).is_valid

    def place(self, mark, pos) -> bool:
        """
        Place a mark if the move is legal.

        Returns:
            True if the board changed, False if the move was ignored.
        """
        result = self.check_move(mark, pos)
        if not result.is_valid:
            logger.debug("Ignoring placement of %r at %r: %s", mark, pos, result.error_message)
            return False

        row, col = pos_to_cell(pos)
        self._grid[row, col] = mark.cell
        return True

    def undo(self, pos) -> None:
        """Clear the cell at `pos`. Out-of-range positions are ignored."""
        if not is_position(pos):
            return
        row, col = pos_to_cell(pos)
        self._grid[row, col] = Cell.EMPTY

    def outcome(self) -> Outcome:
        """Compute the current outcome from scratch."""
        return self._win_checker.check(self._grid)

    def legal_moves(self) -> List[int]:
        """All empty positions, in ascending order."""
        return [int(i) + 1 for i in np.flatnonzero(self._grid.ravel() == Cell.EMPTY)]

    # ---- inspection ----

    def cell(self, pos: int) -> Cell:
        """The state of the cell at `pos` (1-9)."""
        row, col = pos_to_cell(pos)
        return Cell(int(self._grid[row, col]))

    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of all nine cells in position order."""
        return tuple(Cell(int(value)) for value in self._grid.ravel())

    def rows(self) -> List[List[Cell]]:
        """The grid as a list of rows of Cells."""
        return [[Cell(int(value)) for value in row] for row in self._grid]

    def mark_count(self) -> int:
        """How many cells hold a mark."""
        return int(np.count_nonzero(self._grid))

    def is_empty(self) -> bool:
        return self.mark_count() == 0

    def is_full(self) -> bool:
        return self.mark_count() == GameConfig.NUM_CELLS

    # ---- lifecycle ----

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board

    def reset(self) -> None:
        """Clear every cell for a new game."""
        self._grid.fill(Cell.EMPTY)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None

    def __repr__(self) -> str:
        marks = "".join(str(c.mark) if c.mark else "." for c in self.cells())
        return f"Board({marks[0:3]}/{marks[3:6]}/{marks[6:9]})"
