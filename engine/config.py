"""
Engine configuration for the TicTacToe engine.
All the tunable constants for the board, the search and the hosts.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    Hosts read these values; the engine itself never changes them.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid stored row-major as 9 cells
    GRID_WIDTH = 3
    BOARD_SIZE = GRID_WIDTH * GRID_WIDTH  # 9 cells

    # ==================== SEARCH SETTINGS ====================
    # Terminal score for a won game (lost game is the negative)
    WIN_SCORE = 10

    # How many plies MEDIUM looks ahead before scoring a branch as neutral
    MEDIUM_SEARCH_DEPTH = 3

    # Difficulty used when a host does not pick one (name of a Difficulty member)
    DEFAULT_DIFFICULTY = "HARD"

    # ==================== HOST SETTINGS ====================
    # Artificial "thinking" delay before the AI moves, in milliseconds.
    # Only hosts use this, the engine never sleeps.
    AI_DELAY_MS = {
        "EASY": 800,
        "MEDIUM": 600,
        "HARD": 400,
    }
