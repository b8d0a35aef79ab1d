"""Key event handlers that update the game's movement state or close it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pixelpad.keys import Action, KeyData


@dataclass
class InputState:
    """Which movement directions are currently held down."""

    move_up: bool = False
    move_down: bool = False
    move_left: bool = False
    move_right: bool = False


def close_window(keydata: KeyData, game: Any) -> None:
    """Ask the game to close when the key is pressed."""
    if keydata.action == Action.PRESS:
        game.close()


def _track(flag: str, keydata: KeyData, game: Any) -> None:
    if keydata.action == Action.PRESS:
        setattr(game.input_state, flag, True)
    elif keydata.action == Action.RELEASE:
        setattr(game.input_state, flag, False)


def move_up(keydata: KeyData, game: Any) -> None:
    """Start moving up on press, stop on release."""
    _track("move_up", keydata, game)


def move_down(keydata: KeyData, game: Any) -> None:
    """Start moving down on press, stop on release."""
    _track("move_down", keydata, game)


def move_left(keydata: KeyData, game: Any) -> None:
    """Start moving left on press, stop on release."""
    _track("move_left", keydata, game)


def move_right(keydata: KeyData, game: Any) -> None:
    """Start moving right on press, stop on release."""
    _track("move_right", keydata, game)