"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, GameState, Player, WINNING_LINES


class OutcomeKind(Enum):
    """Where a game stands after a move."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    kind: OutcomeKind
    winner: Optional[Player] = None
    line: Tuple[int, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.ONGOING


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Lines are scanned in a fixed order and the first complete one wins.
        A full board with no complete line is a draw.

        Args:
            board: The board to check.

        Returns:
            The Outcome (ongoing, win with mark and line, or draw).
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome(OutcomeKind.WIN, winner=winner, line=line)

        if board.is_full():
            return Outcome(OutcomeKind.DRAW)

        return Outcome(OutcomeKind.ONGOING)

    def _check_line(self, board: Board, line: Tuple[int, ...]) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Player if all 3 cells hold the same mark, None otherwise.
        """
        a, b, c = (board.cells[i] for i in line)

        if a is None:
            return None  # Empty cell, no winner on this line

        if a == b == c:
            return a

        return None

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning Player, or None if no winner yet."""
        return self.evaluate(board).winner

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has a line."""
        return self.evaluate(board).kind == OutcomeKind.DRAW

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, ...]]:
        """Get the winning line as cell indices, or None."""
        outcome = self.evaluate(board)
        return outcome.line if outcome.kind == OutcomeKind.WIN else None

    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Copy the board's outcome onto the game state.

        Args:
            game_state: The game state to update.

        Returns:
            The outcome that was applied.
        """
        outcome = self.evaluate(game_state.board)

        if outcome.kind == OutcomeKind.WIN:
            game_state.winner = outcome.winner
            game_state.winning_line = outcome.line
            game_state.is_game_over = True
        elif outcome.kind == OutcomeKind.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return outcome


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O = Player.X, Player.O

    # Test 1: Horizontal win
    board1 = Board(cells=[X, X, X, None, O, None, O, None, None])
    outcome = checker.evaluate(board1)
    print(f"Test 1 (horizontal): {outcome}")
    assert outcome.winner == X and outcome.line == (0, 1, 2)

    # Test 2: Diagonal win
    board2 = Board(cells=[O, X, None, X, O, None, None, None, O])
    outcome = checker.evaluate(board2)
    print(f"Test 2 (diagonal): {outcome}")
    assert outcome.winner == O and outcome.line == (0, 4, 8)

    # Test 3: Draw (full board, no winner)
    board3 = Board(cells=[X, O, X, X, O, O, O, X, X])
    outcome = checker.evaluate(board3)
    print(f"Test 3 (draw): {outcome}")
    assert outcome.kind == OutcomeKind.DRAW

    print("\nWinChecker test done!")
