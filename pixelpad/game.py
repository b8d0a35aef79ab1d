"""Game state: the window settings, the moving image and its key bindings."""

from __future__ import annotations

import random

from pixelpad.dispatch import KeyDispatcher
from pixelpad.events import (
    InputState,
    close_window,
    move_down,
    move_left,
    move_right,
    move_up,
)
from pixelpad.image import Image, pixel
from pixelpad.keys import Key, KeyData

WIDTH = 800
HEIGHT = 600
TITLE = "Name Goes here"
IMAGE_SIZE = 100
MOVE_STEP = 5
_CHANNEL_LIMIT = 0xFF


class Game:
    """Everything one running game needs between frames."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, title: str = TITLE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window dimensions {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.image = Image(IMAGE_SIZE, IMAGE_SIZE)
        self.dispatcher = KeyDispatcher()
        self.input_state = InputState()
        self.running = True

    def __repr__(self) -> str:
        return (
            f"Game(width={self.width}, height={self.height}, "
            f"title={self.title!r}, running={self.running})"
        )

    def close(self) -> None:
        """Ask the main loop to stop after the current frame."""
        self.running = False

    def key_input(self, keydata: KeyData) -> bool:
        """Route a key event to its handler; return whether one was called."""
        return self.dispatcher.handle(keydata, self)

    def update_state(self) -> None:
        """Move the image's first instance according to the held directions."""
        instance = self.image.instances[0]
        state = self.input_state
        if state.move_up:
            instance.y -= MOVE_STEP
        if state.move_down:
            instance.y += MOVE_STEP
        if state.move_left:
            instance.x -= MOVE_STEP
        if state.move_right:
            instance.x += MOVE_STEP

    def randomize(self, rng: random.Random) -> None:
        """Fill the image with random colours, column by column."""
        image = self.image
        for x in range(image.width):
            for y in range(image.height):
                color = pixel(
                    rng.randrange(_CHANNEL_LIMIT),
                    rng.randrange(_CHANNEL_LIMIT),
                    rng.randrange(_CHANNEL_LIMIT),
                    rng.randrange(_CHANNEL_LIMIT),
                )
                image.put_pixel(x, y, color)

    def frame(self, rng: random.Random) -> None:
        """Run the per-frame hooks in the order they were installed."""
        self.randomize(rng)
        self.update_state()


def game_init(width: int = WIDTH, height: int = HEIGHT, title: str = TITLE) -> Game:
    """Create a game with its image placed at the origin and keys bound."""
    game = Game(width, height, title)
    game.image.add_instance(0, 0)
    game.dispatcher.add(Key.ESCAPE, close_window)
    game.dispatcher.add(Key.W, move_up)
    game.dispatcher.add(Key.S, move_down)
    game.dispatcher.add(Key.A, move_left)
    game.dispatcher.add(Key.D, move_right)
    return game