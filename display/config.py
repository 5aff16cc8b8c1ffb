"""
Display configuration for TicTacToe.
Sizes and colors for drawing the board.

Colors are BGR (OpenCV order).
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    """

    # ==================== BOARD IMAGE ====================
    BOARD_SIZE = 3
    CELL_SIZE_PX = 160
    BOARD_OUTPUT_SIZE = CELL_SIZE_PX * BOARD_SIZE  # 480 pixels

    # Status bar under the board
    STATUS_BAR_HEIGHT = 60

    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10
    MARK_PADDING_PX = 35  # Space between a mark and its cell border

    # ==================== COLORS ====================
    BACKGROUND_COLOR = (46, 26, 26)      # Dark navy
    GRID_COLOR = (128, 128, 128)
    X_COLOR = (113, 107, 255)            # Red-ish
    O_COLOR = (136, 255, 0)              # Green
    WINNER_CELL_COLOR = (0, 140, 180)    # Gold-ish highlight
    TEXT_COLOR = (255, 255, 255)
    STATUS_COLOR = (0, 215, 255)         # Yellow

    # ==================== WINDOW ====================
    WINDOW_NAME = "TicTacToe"
    SCREENSHOT_PREFIX = "tictactoe"
