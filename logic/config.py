"""
Game configuration for TicTacToe.
Settings for the players, the bot's pacing, and its random choices.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune how the bot plays!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row by row

    # Center and corners, used by the bot's fallback rules
    CENTER_INDEX = 4
    CORNER_INDICES = (0, 2, 6, 8)

    # ==================== PLAYER SETTINGS ====================
    # The human always moves first
    HUMAN_MARK = "X"
    AI_MARK = "O"

    # ==================== BOT SETTINGS ====================
    # Delay before the bot answers (seconds), so its move is visible
    AI_MOVE_DELAY_S = 0.5

    # Seed for the corner choice. None = different games every run
    AI_RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True  # Print the bot's reasoning to the console
