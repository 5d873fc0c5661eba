import io

import pytest

from spritekit.clock import Clock
from spritekit.game import (
    IDENTITY,
    KEY_S,
    KEY_W,
    FpsReporter,
    Game,
    initial_layout,
    movement_delta,
)
from spritekit.renderer import Renderer


class FakePlatform:
    def __init__(self):
        self.pressed = set()

    def is_key_pressed(self, key):
        return key in self.pressed


def make_game():
    platform = FakePlatform()
    clock = Clock(lambda: 0.0, lambda delay: None)
    return Game(platform, clock, Renderer(10)), platform


def test_initial_layout_empty():
    assert initial_layout(0) == []


def test_initial_layout_bounds():
    layout = initial_layout(50)
    assert len(layout) == 50
    assert layout[0] == (0.0, 0.0)
    assert all(0.0 <= x < 2.0 and 0.0 <= y < 2.0 for x, y in layout)


def test_opposite_keys_cancel():
    assert movement_delta(True, True, True, True) == (0.0, 0.0)


def test_movement_is_symmetric():
    up = movement_delta(True, False, False, False)
    down = movement_delta(False, True, False, False)
    assert up[0] == 0.0 and up[1] > 0.0
    assert down == (-up[0], -up[1])
    left = movement_delta(False, False, True, False)
    right = movement_delta(False, False, False, True)
    assert right[0] > 0.0 and left == (-right[0], 0.0)


def test_fps_reporter_waits_a_second():
    times = iter([0.5, 1.5, 1.6])
    out = io.StringIO()
    reporter = FpsReporter(lambda: next(times), out)
    assert reporter.frame(60, 3, 4) is None
    assert out.getvalue() == ""
    line = reporter.frame(60, 3, 4)
    assert line.startswith("FPS: 60")
    assert "TPS: 2" in line
    assert "EA-count: 3" in line and "ES-count: 4" in line
    assert out.getvalue() == line
    assert reporter.frame(60, 3, 4) is None


def test_update_without_keys_keeps_identity():
    game, _ = make_game()
    game.update(0.016)
    assert game.model == IDENTITY
    assert game.position == (0.0, 0.0, 0.0)


def test_update_moves_model():
    game, platform = make_game()
    platform.pressed = {KEY_W}
    game.update(0.016)
    assert game.position[0] == 0.0
    assert game.position[1] > 0.0
    assert game.model[13] == game.position[1]
    assert game.model[12] == 0.0


def test_update_back_and_forth_returns_to_identity():
    game, platform = make_game()
    platform.pressed = {KEY_W}
    game.update(0.016)
    platform.pressed = {KEY_S}
    game.update(0.016)
    assert game.model == IDENTITY


def test_render_before_init_raises():
    game, _ = make_game()
    with pytest.raises(RuntimeError):
        game.render()