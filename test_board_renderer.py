"""Tests for drawing the board and mapping clicks."""

import numpy as np
import pytest

from display.board_renderer import BoardRenderer
from display.config import DisplayConfig
from logic.game_state import Player
from logic.turn_controller import GameSnapshot, ControllerState

X, O, _ = Player.X, Player.O, None


def make_snapshot(board, winning_line=(), winner=None, is_draw=False):
    over = winner is not None or is_draw
    return GameSnapshot(
        board=tuple(board),
        current_player=X,
        state=ControllerState.TERMINAL if over else ControllerState.WAITING_FOR_HUMAN,
        is_game_over=over,
        winner=winner,
        is_draw=is_draw,
        winning_line=tuple(winning_line),
        human_player=X,
        ai_player=O,
        move_count=sum(cell is not None for cell in board)
    )


@pytest.fixture
def renderer():
    return BoardRenderer(DisplayConfig())


def test_render_size(renderer):
    image = renderer.render(make_snapshot([_] * 9))

    width, height = renderer.image_size
    assert image.shape == (height, width, 3)
    assert image.dtype == np.uint8


def test_empty_cell_is_background(renderer):
    image = renderer.render(make_snapshot([_] * 9))

    cell = DisplayConfig.CELL_SIZE_PX
    assert tuple(image[cell // 2, cell // 2]) == DisplayConfig.BACKGROUND_COLOR


def test_marks_are_drawn(renderer):
    empty = renderer.render(make_snapshot([_] * 9))
    marked = renderer.render(make_snapshot([X, _, _, _, O, _, _, _, _]))

    cell = DisplayConfig.CELL_SIZE_PX
    # The X crosses its cell's center, the O ring does not
    assert tuple(marked[cell // 2, cell // 2]) == DisplayConfig.X_COLOR
    assert tuple(marked[cell + cell // 2, cell + cell // 2]) == DisplayConfig.BACKGROUND_COLOR
    assert not np.array_equal(empty, marked)


def test_winning_line_is_highlighted(renderer):
    image = renderer.render(make_snapshot(
        [X, X, X, O, O, _, _, _, _], winning_line=(0, 1, 2), winner=X
    ))

    cell = DisplayConfig.CELL_SIZE_PX
    # Near a cell corner, away from marks and grid lines
    assert tuple(image[10, 10]) == DisplayConfig.WINNER_CELL_COLOR
    assert tuple(image[10, 2 * cell + 10]) == DisplayConfig.WINNER_CELL_COLOR
    assert tuple(image[cell + 10, 10]) == DisplayConfig.BACKGROUND_COLOR


@pytest.mark.parametrize("x, y, index", [
    (0, 0, 0),
    (159, 10, 0),
    (160, 10, 1),
    (479, 0, 2),
    (10, 200, 3),
    (240, 240, 4),
    (479, 479, 8),
])
def test_pixel_to_index(renderer, x, y, index):
    assert renderer.pixel_to_index(x, y) == index


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (480, 10), (10, 480), (100, 520)])
def test_pixel_off_board(renderer, x, y):
    assert renderer.pixel_to_index(x, y) is None
