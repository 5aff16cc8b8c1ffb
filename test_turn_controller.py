"""Tests for the turn controller and game lifecycle."""

import random
import time

import pytest

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.game_state import Board, GameState, Player
from logic.turn_controller import (
    TurnController, ControllerState, describe_status, threading_scheduler
)

X, O, _ = Player.X, Player.O, None


class ManualScheduler:
    """Holds scheduled callbacks until the test fires them."""

    def __init__(self):
        self.pending = []

    def __call__(self, delay_s, callback):
        self.pending.append((delay_s, callback))

    def fire(self):
        _delay, callback = self.pending.pop(0)
        callback()


class RecordingAI(AIPlayer):
    """AI that remembers every board it was asked about."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.boards_seen = []

    def select_move(self, board, own_mark, opponent_mark):
        self.boards_seen.append(board.copy())
        return super().select_move(board, own_mark, opponent_mark)


def make_controller(scheduler=None, ai=None):
    return TurnController(
        GameConfig(),
        ai=ai or AIPlayer(Player.O, rng=random.Random(0)),
        scheduler=scheduler
    )


def set_board(controller, cells, to_move=X):
    controller.game_state = GameState(board=Board(cells=list(cells)), current_player=to_move)


def test_initial_state():
    snapshot = make_controller().get_state()

    assert snapshot.board == (None,) * 9
    assert snapshot.current_player == X
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN
    assert not snapshot.is_game_over
    assert snapshot.winner is None and not snapshot.is_draw
    assert snapshot.winning_line == ()
    assert (snapshot.human_player, snapshot.ai_player) == (X, O)


def test_corner_opening_gets_center_answer():
    controller = make_controller()

    result = controller.apply_human_move(0)

    assert result.accepted
    assert result.error_message is None
    assert result.state.board[0] == X
    assert result.state.board[4] == O
    assert result.state.state == ControllerState.WAITING_FOR_HUMAN
    assert result.state.current_player == X
    assert result.state.move_count == 2


@pytest.mark.parametrize("index", [-1, 9, None])
def test_out_of_range_move_is_rejected(index):
    controller = make_controller()

    result = controller.apply_human_move(index)

    assert not result.accepted
    assert "Invalid position" in result.error_message
    assert result.state == controller.get_state()
    assert result.state.board == (None,) * 9


def test_occupied_cell_is_rejected_without_change():
    controller = make_controller()
    controller.apply_human_move(0)
    before = controller.get_state()

    result = controller.apply_human_move(4)

    assert not result.accepted
    assert "occupied" in result.error_message
    assert controller.get_state() == before


def test_human_win_ends_game_without_ai_move():
    ai = RecordingAI(Player.O, rng=random.Random(0))
    controller = make_controller(ai=ai)
    set_board(controller, [X, X, _, O, O, _, _, _, _])

    result = controller.apply_human_move(2)

    assert result.accepted
    assert result.state.state == ControllerState.TERMINAL
    assert result.state.is_game_over
    assert result.state.winner == X
    assert result.state.winning_line == (0, 1, 2)
    assert ai.boards_seen == []


def test_ai_win_ends_game():
    controller = make_controller()
    set_board(controller, [X, _, _, O, O, _, X, _, _])

    result = controller.apply_human_move(1)

    assert result.accepted
    assert result.state.board[5] == O
    assert result.state.state == ControllerState.TERMINAL
    assert result.state.winner == O
    assert result.state.winning_line == (3, 4, 5)


def test_draw_on_last_cell():
    ai = RecordingAI(Player.O, rng=random.Random(0))
    controller = make_controller(ai=ai)
    set_board(controller, [X, O, X, X, O, O, O, X, _])

    result = controller.apply_human_move(8)

    assert result.accepted
    assert result.state.is_draw
    assert result.state.winner is None
    assert result.state.state == ControllerState.TERMINAL
    assert ai.boards_seen == []


def test_terminal_state_rejects_moves():
    controller = make_controller()
    set_board(controller, [X, X, _, O, O, _, _, _, _])
    controller.apply_human_move(2)
    before = controller.get_state()

    result = controller.apply_human_move(5)

    assert not result.accepted
    assert "over" in result.error_message
    assert controller.get_state() == before


@pytest.mark.parametrize("seed", range(20))
def test_full_games_never_ask_ai_about_full_board(seed):
    rng = random.Random(seed)
    ai = RecordingAI(Player.O, rng=random.Random(seed))
    controller = make_controller(ai=ai)

    while not controller.get_state().is_game_over:
        empty = [i for i, cell in enumerate(controller.get_state().board) if cell is None]
        assert controller.apply_human_move(rng.choice(empty)).accepted

    snapshot = controller.get_state()
    assert snapshot.state == ControllerState.TERMINAL
    assert snapshot.is_draw or snapshot.winner is not None
    assert all(not board.is_full() for board in ai.boards_seen)


def test_delayed_ai_move_is_scheduled():
    scheduler = ManualScheduler()
    controller = make_controller(scheduler=scheduler)

    result = controller.apply_human_move(0)

    assert result.accepted
    assert result.state.state == ControllerState.AUTOMATED_TURN
    assert result.state.board.count(None) == 8
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0][0] == GameConfig.AI_MOVE_DELAY_S

    scheduler.fire()

    snapshot = controller.get_state()
    assert snapshot.board[4] == O
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN


def test_human_move_rejected_while_ai_pending():
    scheduler = ManualScheduler()
    controller = make_controller(scheduler=scheduler)
    controller.apply_human_move(0)
    before = controller.get_state()

    result = controller.apply_human_move(1)

    assert not result.accepted
    assert "turn" in result.error_message
    assert controller.get_state() == before


def test_reset_during_delay_drops_pending_ai_move():
    scheduler = ManualScheduler()
    controller = make_controller(scheduler=scheduler)
    controller.apply_human_move(0)

    controller.reset()
    scheduler.fire()

    snapshot = controller.get_state()
    assert snapshot.board == (None,) * 9
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN


def test_stale_ai_move_does_not_play_into_new_game():
    scheduler = ManualScheduler()
    controller = make_controller(scheduler=scheduler)
    controller.apply_human_move(0)
    controller.reset()
    controller.apply_human_move(8)

    scheduler.fire()  # From the first game

    snapshot = controller.get_state()
    assert snapshot.board.count(None) == 8
    assert snapshot.state == ControllerState.AUTOMATED_TURN

    scheduler.fire()

    snapshot = controller.get_state()
    assert snapshot.board[4] == O
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN


def test_run_automated_turn_is_noop_when_waiting_for_human():
    controller = make_controller()

    assert controller.run_automated_turn() is False
    assert controller.get_state().board == (None,) * 9


def test_threading_scheduler_plays_ai_move():
    config = GameConfig()
    config.AI_MOVE_DELAY_S = 0.01
    controller = TurnController(config, scheduler=threading_scheduler)

    controller.apply_human_move(0)

    deadline = time.time() + 5
    while controller.get_state().state == ControllerState.AUTOMATED_TURN:
        assert time.time() < deadline, "AI move never fired"
        time.sleep(0.01)

    snapshot = controller.get_state()
    assert snapshot.board[4] == O
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN


def test_reset_from_any_state_is_idempotent():
    controller = make_controller()
    set_board(controller, [X, X, _, O, O, _, _, _, _])
    controller.apply_human_move(2)

    first = controller.reset()
    second = controller.reset()

    assert first == second
    assert first.board == (None,) * 9
    assert first.current_player == X
    assert first.state == ControllerState.WAITING_FOR_HUMAN
    assert not first.is_game_over
    assert first.winner is None and first.winning_line == ()
    assert first.move_count == 0


def test_same_marks_are_refused():
    config = GameConfig()
    config.AI_MARK = "X"

    with pytest.raises(ValueError):
        TurnController(config)


def test_describe_status():
    controller = make_controller()
    assert describe_status(controller.get_state()) == ("Player X's Turn", "")

    set_board(controller, [X, _, _, O, O, _, X, _, _])
    controller.apply_human_move(1)
    assert describe_status(controller.get_state()) == ("Game Over", "Player O Wins!")

    controller.reset()
    set_board(controller, [X, O, X, X, O, O, O, X, _])
    controller.apply_human_move(8)
    assert describe_status(controller.get_state()) == ("Game Over", "It's a Draw!")


def test_reset_keeps_configured_first_mover():
    config = GameConfig()
    config.HUMAN_MARK = "O"
    config.AI_MARK = "X"
    controller = TurnController(config, ai=AIPlayer(Player.X, rng=random.Random(0)))
    assert controller.get_state().current_player == O

    controller.apply_human_move(0)
    snapshot = controller.reset()

    assert snapshot.current_player == O
    assert snapshot.board == (None,) * 9
    assert snapshot.state == ControllerState.WAITING_FOR_HUMAN
