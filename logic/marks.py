"""
Marks, cells and board positions.

Positions are what players type (1-9, row-major, top-left is 1).
Internally the board is indexed by (row, col).
"""

from enum import Enum, IntEnum
from typing import Optional, Tuple

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def cell(self) -> "Cell":
        """The cell value this mark leaves on the board."""
        return Cell.X if self == Mark.X else Cell.O

    @classmethod
    def parse(cls, text: str) -> "Mark":
        """
        Parse a mark typed by a user ("x", " O ", ...).

        Raises:
            ValueError: if the text is not X or O.
        """
        return cls(text.strip().upper())

    def __str__(self) -> str:
        return self.value


class Cell(IntEnum):
    """State of a single square. Stored as int8 in the board grid."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def mark(self) -> Optional[Mark]:
        """The Mark in this cell, or None if empty."""
        if self == Cell.EMPTY:
            return None
        return Mark.X if self == Cell.X else Mark.O


def is_position(pos) -> bool:
    """True if pos is an integer naming one of the nine squares."""
    if isinstance(pos, bool) or not isinstance(pos, int):
        return False
    return GameConfig.FIRST_POSITION <= pos <= GameConfig.LAST_POSITION


def pos_to_cell(pos: int) -> Tuple[int, int]:
    """
    Convert a 1-9 position to (row, col).

    Raises:
        ValueError: if pos is not in 1-9.
    """
    if not is_position(pos):
        raise ValueError(f"Invalid position {pos!r}. Must be 1-9.")
    return divmod(pos - 1, GameConfig.BOARD_SIZE)


def cell_to_pos(row: int, col: int) -> int:
    """Convert (row, col) to a 1-9 position."""
    size = GameConfig.BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Invalid cell ({row}, {col}). Must be 0-2.")
    return row * size + col + 1
