"""
Game configuration for TicTacToe.
All the constants for the board, the minimax scoring and logging.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a fixed 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # Positions are numbered 1-9, row-major, top-left is 1
    FIRST_POSITION = 1
    LAST_POSITION = NUM_CELLS

    # ==================== MINIMAX SETTINGS ====================
    # A win is worth WIN_SCORE minus the depth it was reached at,
    # so faster wins and slower losses score better
    WIN_SCORE = 10
    TIE_SCORE = 0

    # ==================== PLAYER SETTINGS ====================
    PLAYER_ONE_NAME = "Player 1"
    PLAYER_TWO_NAME = "Player 2"
    HUMAN_NAME = "Player"
    COMPUTER_NAME = "Computer"

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    DEFAULT_LOG_LEVEL = logging.WARNING
    VERBOSE_LOG_LEVEL = logging.DEBUG
