import random

import pytest

from pixelpad.game import HEIGHT, IMAGE_SIZE, MOVE_STEP, TITLE, WIDTH, Game, game_init
from pixelpad.keys import Action, Key, KeyData


def press(key):
    return KeyData(key, Action.PRESS)


def release(key):
    return KeyData(key, Action.RELEASE)


def test_game_init_defaults():
    game = game_init()
    assert (game.width, game.height, game.title) == (WIDTH, HEIGHT, TITLE)
    assert game.running
    assert (game.image.width, game.image.height) == (IMAGE_SIZE, IMAGE_SIZE)
    assert len(game.image.instances) == 1
    assert (game.image.instances[0].x, game.image.instances[0].y) == (0, 0)


def test_game_init_binds_five_keys():
    game = game_init()
    assert len(game.dispatcher) == 5
    for key in (Key.ESCAPE, Key.W, Key.S, Key.A, Key.D):
        assert key in game.dispatcher
    assert Key.Q not in game.dispatcher


@pytest.mark.parametrize("width,height", [(0, 600), (800, 0), (-1, 10)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        Game(width, height, "t")


def test_escape_press_closes():
    game = game_init()
    assert game.key_input(press(Key.ESCAPE)) is True
    assert game.running is False


def test_escape_release_does_not_close():
    game = game_init()
    game.key_input(release(Key.ESCAPE))
    assert game.running is True


def test_close_stops_running():
    game = game_init()
    game.close()
    assert game.running is False


def test_unbound_key_is_ignored():
    game = game_init()
    assert game.key_input(press(Key.Q)) is False
    assert game.running is True


@pytest.mark.parametrize(
    "key,flag",
    [(Key.W, "move_up"), (Key.S, "move_down"), (Key.A, "move_left"), (Key.D, "move_right")],
)
def test_movement_keys_toggle_state(key, flag):
    game = game_init()
    game.key_input(press(key))
    assert getattr(game.input_state, flag) is True
    game.key_input(KeyData(key, Action.REPEAT))
    assert getattr(game.input_state, flag) is True
    game.key_input(release(key))
    assert getattr(game.input_state, flag) is False


def test_update_state_moves_instance():
    game = game_init()
    game.key_input(press(Key.W))
    game.key_input(press(Key.D))
    game.update_state()
    instance = game.image.instances[0]
    assert (instance.x, instance.y) == (MOVE_STEP, -MOVE_STEP)


def test_opposite_directions_cancel():
    game = game_init()
    game.key_input(press(Key.A))
    game.key_input(press(Key.D))
    game.update_state()
    assert game.image.instances[0].x == 0


def test_update_state_without_input_keeps_position():
    game = game_init()
    game.update_state()
    instance = game.image.instances[0]
    assert (instance.x, instance.y) == (0, 0)


def test_randomize_is_deterministic_for_seed():
    first = game_init()
    second = game_init()
    first.randomize(random.Random(7))
    second.randomize(random.Random(7))
    assert first.image.pixels == second.image.pixels


def test_randomize_channels_below_limit():
    game = game_init()
    game.randomize(random.Random(1))
    assert max(game.image.pixels) < 0xFF
    assert any(game.image.pixels)


def test_frame_randomizes_and_moves():
    game = game_init()
    game.key_input(press(Key.S))
    game.frame(random.Random(3))
    reference = game_init()
    reference.randomize(random.Random(3))
    assert game.image.pixels == reference.image.pixels
    assert game.image.instances[0].y == MOVE_STEP