"""
Logic module for TicTacToe.
Handles the board, rules, outcomes and the minimax AI opponent.
"""

from .config import GameConfig
from .marks import Mark, Cell, pos_to_cell, cell_to_pos
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome, OutcomeStatus
from .board import Board
from .ai_player import AIPlayer
from .players import Player, HumanPlayer, ComputerPlayer, RandomPlayer, Difficulty, make_computer_player
from .session import GameSession
from .errors import TicTacToeError, GameOverError, IllegalMoveError

__version__ = "1.0.0"
