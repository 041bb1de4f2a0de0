"""
Move validator for TicTacToe.
Validates that placements follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

import numpy as np

from .marks import Cell, Mark, is_position, pos_to_cell


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates TicTacToe placements.

    Rules:
    1. Position must be an integer 1-9
    2. Mark must be X or O
    3. Can only place on empty cells

    Each broken rule has its own message, but callers that only
    ask "is this legal?" see a plain bool.
    """

    def validate_move(self, grid: np.ndarray, mark, pos) -> ValidationResult:
        """
        Validate a placement.

        Args:
            grid: The 3x3 cell grid.
            mark: The mark to place.
            pos: Position to place it (1-9).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not is_position(pos):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {pos!r}. Must be 1-9."
            )

        if not isinstance(mark, Mark):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unrecognized mark {mark!r}. Must be X or O."
            )

        row, col = pos_to_cell(pos)
        occupant = Cell(int(grid[row, col]))
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {pos} is already taken by {occupant.mark}."
            )

        return VALID
