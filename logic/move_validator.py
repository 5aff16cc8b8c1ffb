"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Must be the player's turn
    3. Can only place on an empty cell 0-8
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.value}'s turn!"
            )

        board = game_state.board
        if board.is_empty(index):
            return ValidationResult(is_valid=True)

        in_range = (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(board.cells)
        )
        if in_range:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board.cells[index].value}"
            )

        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid position {index!r}. Must be 0-8."
        )

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of empty cell indices, or [] once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
