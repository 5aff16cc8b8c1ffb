"""
Board renderer for TicTacToe.
Draws the game into an image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional

from logic.game_state import Player, index_to_cell, cell_to_index
from logic.turn_controller import GameSnapshot, describe_status
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws a GameSnapshot as a BGR numpy image.

    The board is a square of BOARD_OUTPUT_SIZE pixels with a status bar
    underneath. Both the OpenCV window and the Tkinter UI show this image.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    @property
    def image_size(self):
        """(width, height) of rendered images."""
        return (
            self.config.BOARD_OUTPUT_SIZE,
            self.config.BOARD_OUTPUT_SIZE + self.config.STATUS_BAR_HEIGHT
        )

    def render(self, snapshot: GameSnapshot) -> np.ndarray:
        """
        Draw the board, the marks, the winning line and the status text.

        Args:
            snapshot: The game to draw.

        Returns:
            BGR image of shape (height, width, 3).
        """
        width, height = self.image_size
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        cell_size = self.config.CELL_SIZE_PX
        board_size = self.config.BOARD_OUTPUT_SIZE

        # Highlight winning cells first so marks and grid stay on top
        for index in snapshot.winning_line:
            row, col = index_to_cell(index)
            cv2.rectangle(
                image,
                (col * cell_size, row * cell_size),
                ((col + 1) * cell_size, (row + 1) * cell_size),
                self.config.WINNER_CELL_COLOR,
                -1
            )

        # Draw grid lines
        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(
                image,
                (i * cell_size, 0),
                (i * cell_size, board_size),
                self.config.GRID_COLOR,
                self.config.GRID_LINE_WIDTH
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, i * cell_size),
                (board_size, i * cell_size),
                self.config.GRID_COLOR,
                self.config.GRID_LINE_WIDTH
            )

        for index, mark in enumerate(snapshot.board):
            if mark is not None:
                self._draw_mark(image, index, mark)

        self._draw_status(image, snapshot)

        return image

    def _draw_mark(self, image: np.ndarray, index: int, mark: Player):
        """Draw an X or an O in a cell."""
        cell_size = self.config.CELL_SIZE_PX
        pad = self.config.MARK_PADDING_PX
        row, col = index_to_cell(index)

        x1, y1 = col * cell_size + pad, row * cell_size + pad
        x2, y2 = (col + 1) * cell_size - pad, (row + 1) * cell_size - pad

        if mark == Player.X:
            color = self.config.X_COLOR
            cv2.line(image, (x1, y1), (x2, y2), color, self.config.MARK_LINE_WIDTH)
            cv2.line(image, (x1, y2), (x2, y1), color, self.config.MARK_LINE_WIDTH)
        else:
            center = (col * cell_size + cell_size // 2, row * cell_size + cell_size // 2)
            cv2.circle(
                image,
                center,
                cell_size // 2 - pad,
                self.config.O_COLOR,
                self.config.MARK_LINE_WIDTH
            )

    def _draw_status(self, image: np.ndarray, snapshot: GameSnapshot):
        """Draw the turn/result text in the status bar."""
        turn_text, status_text = describe_status(snapshot)
        y = self.config.BOARD_OUTPUT_SIZE + self.config.STATUS_BAR_HEIGHT // 2 + 8

        cv2.putText(
            image,
            status_text or turn_text,
            (20, y),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.8,
            self.config.STATUS_COLOR if status_text else self.config.TEXT_COLOR,
            2
        )

    def pixel_to_index(self, x: int, y: int) -> Optional[int]:
        """
        Convert a click position to a cell index.

        Args:
            x: X coordinate in the rendered image.
            y: Y coordinate in the rendered image.

        Returns:
            Cell index (0-8), or None if the click is off the board.
        """
        board_size = self.config.BOARD_OUTPUT_SIZE

        if not (0 <= x < board_size and 0 <= y < board_size):
            return None

        cell_size = self.config.CELL_SIZE_PX
        return cell_to_index(int(y) // cell_size, int(x) // cell_size)
