"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# All possible winning lines, as cell indices (0-8, row by row).
# The order matters: lines are always scanned top to bottom here.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidMove(Exception):
    """Raised when a mark can't be placed (occupied cell, bad index, wrong turn)."""


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * GameConfig.BOARD_SIZE + col


@dataclass
class Board:
    """
    The 3x3 board, stored as 9 cells in row-major order.

    None means empty, otherwise the Player whose mark is there.
    """

    cells: List[Optional[Player]] = field(
        default_factory=lambda: [None] * GameConfig.NUM_CELLS
    )

    def _in_range(self, index) -> bool:
        # bool is an int subclass, but True is not a cell
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < GameConfig.NUM_CELLS
        )

    def is_empty(self, index: int) -> bool:
        """True if the cell holds no mark. Out-of-range indices are never empty."""
        return self._in_range(index) and self.cells[index] is None

    def place(self, index: int, mark: Player) -> "Board":
        """
        Place a mark on the board.

        Args:
            index: Cell index (0-8).
            mark: The player's mark.

        Returns:
            The updated board (self).

        Raises:
            InvalidMove: If the index is out of range or the cell is taken.
        """
        if not self._in_range(index):
            raise InvalidMove(f"Invalid position {index!r}. Must be 0-8.")

        if self.cells[index] is not None:
            raise InvalidMove(
                f"Cell {index} is already occupied by {self.cells[index].value}"
            )

        self.cells[index] = mark
        return self

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for cell in self.cells)

    def reset(self) -> "Board":
        """Clear every cell."""
        self.cells = [None] * GameConfig.NUM_CELLS
        return self

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells, lowest first."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def copy(self) -> "Board":
        """Create a copy of the board."""
        return Board(cells=list(self.cells))

    def print_board(self):
        """Print the board to console."""
        print("\n  0   1   2")
        print("+---+---+---+")

        for row in range(GameConfig.BOARD_SIZE):
            row_str = "|"
            for col in range(GameConfig.BOARD_SIZE):
                mark = self.cells[cell_to_index(row, col)]
                row_str += f" {mark.value if mark else ' '} |"
            print(f"{row} {row_str}")
            print("+---+---+---+")


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game (a session).

    Tracks:
    - The board
    - Current player
    - Move history
    - Game result (ongoing, won, draw) and the winning line
    """

    board: Board = field(default_factory=Board)

    # X always moves first
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False
    winning_line: Tuple[int, ...] = ()

    def make_move(self, index: int) -> Move:
        """
        Place the current player's mark and pass the turn.

        Winner/draw detection is done by the WinChecker afterwards.

        Args:
            index: Cell index (0-8).

        Returns:
            The recorded move.

        Raises:
            InvalidMove: If the game is over or the cell can't be played.
        """
        if self.is_game_over:
            raise InvalidMove("Game is already over!")

        self.board.place(index, self.current_player)

        move = Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        )
        self.moves.append(move)

        self.current_player = self.current_player.opposite()

        return move

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return self.board.get_empty_cells()

    def reset(self, first_player: Player = Player.X) -> "GameState":
        """Back to a fresh game: empty board, `first_player` to move, no result."""
        self.board.reset()
        self.current_player = first_player
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False
        self.winning_line = ()
        return self

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
            winning_line=self.winning_line
        )

    def print_board(self):
        """Print the board and game info to console."""
        self.board.print_board()

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS! Line: {list(self.winning_line)}")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X takes the top row, O answers in the middle row
    for index in [0, 3, 1, 4, 2]:
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()

    try:
        game.make_move(0)
    except InvalidMove as e:
        print(f"\nRejected as expected: {e}")

    print("\nGame state test done!")
