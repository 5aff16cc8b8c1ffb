"""
Logic module for TicTacToe.
Handles game state, rules, turns, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Board, Player, InvalidMove, WINNING_LINES
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome, OutcomeKind
from .ai_player import AIPlayer, MoveRule
from .turn_controller import TurnController, ControllerState, GameSnapshot, MoveResult
