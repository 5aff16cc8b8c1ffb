"""
AI player for TicTacToe.
Uses a fixed list of rules to choose its move (one move of lookahead).
"""

import random
from enum import Enum
from typing import Optional
from .config import GameConfig
from .game_state import Board, GameState, Player, WINNING_LINES


class MoveRule(Enum):
    """The rule that picked the AI's move, in priority order."""
    WIN = "win"              # Complete our own line
    BLOCK = "block"          # Stop the opponent completing theirs
    CENTER = "center"
    CORNER = "corner"        # Random free corner
    FIRST_EMPTY = "first_empty"


class AIPlayer:
    """
    An AI that plays TicTacToe with a greedy rule list.

    Rules, first one that applies wins:
    1. Win now if we have two in a line
    2. Block if the opponent has two in a line
    3. Take the center
    4. Take a random free corner
    5. Take the lowest free cell

    It is beatable on purpose - there is no search beyond the next move.
    """

    def __init__(
        self,
        player: Player = Player.O,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for the corner choice. Pass a seeded
                 random.Random to make games repeatable.
            config: Game configuration.
        """
        self.player = player
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.AI_RANDOM_SEED)

        # Which rule picked the last move (for debugging)
        self.last_rule: Optional[MoveRule] = None

        # Random stream for suggestions; self.rng is only drawn by the AI's own moves
        self._suggestion_rng = random.Random()

    def find_line_completion(self, board: Board, mark: Player) -> Optional[int]:
        """
        Find a cell that completes a line for `mark`.

        A line qualifies when `mark` holds exactly 2 of its cells and the
        third is empty. Lines are scanned in WINNING_LINES order and the
        first match is returned.

        Args:
            board: The board.
            mark: Whose line to complete.

        Returns:
            The empty cell index, or None if no line qualifies.
        """
        for line in WINNING_LINES:
            values = [board.cells[i] for i in line]

            if values.count(mark) == 2 and values.count(None) == 1:
                return line[values.index(None)]

        return None

    def select_move(
        self,
        board: Board,
        own_mark: Player,
        opponent_mark: Player,
        rng: Optional[random.Random] = None
    ) -> Optional[int]:
        """
        Pick the next move.

        Args:
            board: Current board. Must not be full.
            own_mark: The mark being played.
            opponent_mark: The other mark.
            rng: Random source for the corner choice (default: self.rng).

        Returns:
            Cell index to play, or None if the board is full.
        """
        move = self.find_line_completion(board, own_mark)
        if move is not None:
            return self._chose(move, MoveRule.WIN)

        # Blocking is the same check from the opponent's side
        move = self.find_line_completion(board, opponent_mark)
        if move is not None:
            return self._chose(move, MoveRule.BLOCK)

        if board.is_empty(self.config.CENTER_INDEX):
            return self._chose(self.config.CENTER_INDEX, MoveRule.CENTER)

        corners = [i for i in self.config.CORNER_INDICES if board.is_empty(i)]
        if corners:
            return self._chose((rng or self.rng).choice(corners), MoveRule.CORNER)

        empty_cells = board.get_empty_cells()
        if empty_cells:
            return self._chose(empty_cells[0], MoveRule.FIRST_EMPTY)

        self.last_rule = None
        return None

    def _chose(self, index: int, rule: MoveRule) -> int:
        self.last_rule = rule
        if self.config.DEBUG_MODE:
            print(f"AI ({self.player.value}) plays {index} [{rule.value}]")
        return index

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the AI's move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index, or None if it's not our turn or no moves are left.
        """
        if game_state.current_player != self.player:
            print(f"WARNING: It's not {self.player.value}'s turn!")
            return None

        if game_state.is_game_over:
            return None

        return self.select_move(
            game_state.board,
            self.player,
            self.player.opposite()
        )

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion for the player to move.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if game_state.is_game_over or not game_state.get_empty_cells():
            return "No moves available!"

        mark = game_state.current_player
        # Don't disturb the AI's own rule bookkeeping
        last_rule = self.last_rule
        move = self.select_move(
            game_state.board, mark, mark.opposite(), rng=self._suggestion_rng
        )
        rule = self.last_rule
        self.last_rule = last_rule

        return f"Place {mark.value} at {move} ({rule.value})"


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    X, O = Player.X, Player.O
    ai = AIPlayer(Player.O, rng=random.Random(0))

    # Test 1: AI should block a winning move
    board = Board(cells=[X, X, None, None, O, None, None, None, None])
    board.print_board()
    print("\nAI is O. X is about to win with 2!")

    move = ai.select_move(board, O, X)
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board(cells=[O, O, None, None, X, None, X, None, None])
    board.print_board()
    print("\nAI is O. Can win with 2!")

    move = ai.select_move(board, O, X)
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
