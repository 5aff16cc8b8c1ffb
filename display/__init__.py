"""
Display module for TicTacToe.
Draws the board and turns clicks into cell indices.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
