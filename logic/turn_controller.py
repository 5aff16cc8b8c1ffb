"""
Turn controller for TicTacToe.
Runs one game between the human and the AI: accepts human moves,
answers with the AI, and checks for a winner after every move.
"""

import threading
from enum import Enum
from typing import Callable, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Player, InvalidMove
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer


# schedule(delay_seconds, callback) - runs callback once, later
Scheduler = Callable[[float, Callable[[], None]], None]


def threading_scheduler(delay_s: float, callback: Callable[[], None]):
    """Run `callback` on a timer thread after `delay_s` seconds."""
    timer = threading.Timer(delay_s, callback)
    timer.daemon = True
    timer.start()


class ControllerState(Enum):
    """Whose move the controller is waiting for."""
    WAITING_FOR_HUMAN = "waiting_for_human"
    AUTOMATED_TURN = "automated_turn"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for the display."""
    board: Tuple[Optional[Player], ...]
    current_player: Player
    state: ControllerState
    is_game_over: bool
    winner: Optional[Player]
    is_draw: bool
    winning_line: Tuple[int, ...]
    human_player: Player
    ai_player: Player
    move_count: int


@dataclass(frozen=True)
class MoveResult:
    """Result of a human move."""
    accepted: bool
    state: GameSnapshot
    error_message: Optional[str] = None


class TurnController:
    """
    Runs the game loop for one human against the AI.

    Game flow:
    1. Human (X) picks a cell
    2. Controller validates and applies it, then checks for a winner
    3. AI (O) picks its answer, controller applies it and checks again
    4. Repeat until someone wins or it's a draw, then wait for reset()

    Moves never overlap: everything that touches the game state holds
    the same lock, and a pending AI move only fires for the game it was
    scheduled in.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        ai: Optional[AIPlayer] = None,
        scheduler: Optional[Scheduler] = None
    ):
        """
        Initialize the controller.

        Args:
            config: Game configuration.
            ai: The AI opponent. Created from config if not given.
            scheduler: Used to delay the AI's answer by AI_MOVE_DELAY_S.
                       If None, the AI answers before apply_human_move returns.
        """
        self.config = config or GameConfig()
        self.human_player = Player(self.config.HUMAN_MARK)
        self.ai_player = Player(self.config.AI_MARK)

        if self.human_player == self.ai_player:
            raise ValueError("Human and AI must use different marks")

        self.ai = ai or AIPlayer(self.ai_player, config=self.config)
        self.scheduler = scheduler

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._lock = threading.RLock()
        self._generation = 0
        self.game_state = GameState(current_player=self.human_player)
        self.state = ControllerState.WAITING_FOR_HUMAN

    def get_state(self) -> GameSnapshot:
        """Get a snapshot of the current game."""
        with self._lock:
            game = self.game_state
            return GameSnapshot(
                board=tuple(game.board.cells),
                current_player=game.current_player,
                state=self.state,
                is_game_over=game.is_game_over,
                winner=game.winner,
                is_draw=game.is_draw,
                winning_line=tuple(game.winning_line),
                human_player=self.human_player,
                ai_player=self.ai_player,
                move_count=len(game.moves)
            )

    def apply_human_move(self, index: int) -> MoveResult:
        """
        Play the human's move.

        Rejected moves (occupied cell, bad index, not the human's turn,
        game over) leave the game unchanged.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult with accepted flag and the new state.
        """
        with self._lock:
            if self.state != ControllerState.WAITING_FOR_HUMAN:
                return self._reject(
                    "Game is already over!" if self.state == ControllerState.TERMINAL
                    else f"It's not {self.human_player.value}'s turn!"
                )

            result = self.validator.validate_move(
                self.game_state, index, self.human_player
            )
            if not result.is_valid:
                return self._reject(result.error_message)

            try:
                self.game_state.make_move(index)
            except InvalidMove as e:
                return self._reject(str(e))

            print(f"Human ({self.human_player.value}) plays {index}")

            if self._check_result():
                return MoveResult(accepted=True, state=self.get_state())

            self.state = ControllerState.AUTOMATED_TURN

            if self.scheduler is None:
                self._play_ai_move()
            else:
                generation = self._generation
                self.scheduler(
                    self.config.AI_MOVE_DELAY_S,
                    lambda: self.run_automated_turn(generation)
                )

            return MoveResult(accepted=True, state=self.get_state())

    def run_automated_turn(self, generation: Optional[int] = None) -> bool:
        """
        Play the AI's pending move.

        This is what the scheduler calls. It does nothing if the game was
        reset since the move was scheduled, or it isn't the AI's turn.

        Args:
            generation: The game the move was scheduled for (None = current).

        Returns:
            True if a move was played.
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                return False

            if self.state != ControllerState.AUTOMATED_TURN or self.game_state.is_game_over:
                return False

            self._play_ai_move()
            return True

    def _play_ai_move(self):
        # Only reached while the game is ongoing, so the board has a free cell
        move = self.ai.select_move(
            self.game_state.board,
            self.ai_player,
            self.human_player
        )

        if move is None:
            raise RuntimeError("AI found no move on an ongoing board")

        self.game_state.make_move(move)

        if not self._check_result():
            self.state = ControllerState.WAITING_FOR_HUMAN

    def _check_result(self) -> bool:
        """Update the game result. True if the game just ended."""
        outcome = self.win_checker.update_game_state(self.game_state)

        if outcome.is_terminal:
            self.state = ControllerState.TERMINAL
            if outcome.winner:
                print(f"Game over: {outcome.winner.value} wins with {list(outcome.line)}")
            else:
                print("Game over: draw")
            return True

        return False

    def _reject(self, message: str) -> MoveResult:
        print(f"WARNING: Move rejected - {message}")
        return MoveResult(accepted=False, state=self.get_state(), error_message=message)

    def reset(self) -> GameSnapshot:
        """
        Start a new game. Safe to call at any time.

        Any AI move still waiting on the scheduler is dropped.
        """
        with self._lock:
            self._generation += 1
            self.game_state.reset(first_player=self.human_player)
            self.state = ControllerState.WAITING_FOR_HUMAN
            return self.get_state()


def describe_status(snapshot: GameSnapshot) -> Tuple[str, str]:
    """
    Get the (turn, status) texts to show for a snapshot.

    Returns:
        e.g. ("Player X's Turn", "") or ("Game Over", "Player O Wins!")
    """
    if snapshot.is_game_over:
        if snapshot.winner:
            return "Game Over", f"Player {snapshot.winner.value} Wins!"
        return "Game Over", "It's a Draw!"

    return f"Player {snapshot.current_player.value}'s Turn", ""
