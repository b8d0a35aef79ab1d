"""Window and main loop: feeds keyboard events to a game and draws it."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

import pygame

from pixelpad.game import Game, game_init
from pixelpad.keys import Action, Key, KeyData, Modifier

FPS = 60

# Each entry lists pygame attribute names to try, newest first.
_NAMED_KEYS: tuple[tuple[tuple[str, ...], Key], ...] = (
    (("K_SPACE",), Key.SPACE),
    (("K_QUOTE",), Key.APOSTROPHE),
    (("K_COMMA",), Key.COMMA),
    (("K_MINUS",), Key.MINUS),
    (("K_PERIOD",), Key.PERIOD),
    (("K_SLASH",), Key.SLASH),
    (("K_SEMICOLON",), Key.SEMICOLON),
    (("K_EQUALS",), Key.EQUAL),
    (("K_LEFTBRACKET",), Key.LEFT_BRACKET),
    (("K_BACKSLASH",), Key.BACKSLASH),
    (("K_RIGHTBRACKET",), Key.RIGHT_BRACKET),
    (("K_BACKQUOTE",), Key.GRAVE_ACCENT),
    (("K_ESCAPE",), Key.ESCAPE),
    (("K_RETURN",), Key.ENTER),
    (("K_TAB",), Key.TAB),
    (("K_BACKSPACE",), Key.BACKSPACE),
    (("K_INSERT",), Key.INSERT),
    (("K_DELETE",), Key.DELETE),
    (("K_RIGHT",), Key.RIGHT),
    (("K_LEFT",), Key.LEFT),
    (("K_DOWN",), Key.DOWN),
    (("K_UP",), Key.UP),
    (("K_PAGEUP",), Key.PAGE_UP),
    (("K_PAGEDOWN",), Key.PAGE_DOWN),
    (("K_HOME",), Key.HOME),
    (("K_END",), Key.END),
    (("K_CAPSLOCK",), Key.CAPS_LOCK),
    (("K_SCROLLLOCK", "K_SCROLLOCK"), Key.SCROLL_LOCK),
    (("K_NUMLOCKCLEAR", "K_NUMLOCK"), Key.NUM_LOCK),
    (("K_PRINTSCREEN", "K_PRINT"), Key.PRINT_SCREEN),
    (("K_PAUSE",), Key.PAUSE),
    (("K_KP_PERIOD",), Key.KP_DECIMAL),
    (("K_KP_DIVIDE",), Key.KP_DIVIDE),
    (("K_KP_MULTIPLY",), Key.KP_MULTIPLY),
    (("K_KP_MINUS",), Key.KP_SUBTRACT),
    (("K_KP_PLUS",), Key.KP_ADD),
    (("K_KP_ENTER",), Key.KP_ENTER),
    (("K_KP_EQUALS",), Key.KP_EQUAL),
    (("K_LSHIFT",), Key.LEFT_SHIFT),
    (("K_LCTRL",), Key.LEFT_CONTROL),
    (("K_LALT",), Key.LEFT_ALT),
    (("K_LGUI", "K_LSUPER", "K_LMETA"), Key.LEFT_SUPER),
    (("K_RSHIFT",), Key.RIGHT_SHIFT),
    (("K_RCTRL",), Key.RIGHT_CONTROL),
    (("K_RALT",), Key.RIGHT_ALT),
    (("K_RGUI", "K_RSUPER", "K_RMETA"), Key.RIGHT_SUPER),
    (("K_MENU",), Key.MENU),
)

_MODIFIERS: tuple[tuple[tuple[str, ...], Modifier], ...] = (
    (("KMOD_SHIFT",), Modifier.SHIFT),
    (("KMOD_CTRL",), Modifier.CONTROL),
    (("KMOD_ALT",), Modifier.ALT),
    (("KMOD_GUI", "KMOD_META"), Modifier.SUPERKEY),
    (("KMOD_CAPS",), Modifier.CAPSLOCK),
    (("KMOD_NUM",), Modifier.NUM_LOCK if hasattr(Modifier, "NUM_LOCK") else Modifier.NUMLOCK),
)


def _first_attr(names: Sequence[str]) -> Optional[int]:
    for name in names:
        value = getattr(pygame, name, None)
        if value is not None:
            return value
    return None


def _build_key_table() -> dict[int, Key]:
    table: dict[int, Key] = {}
    for letter in "abcdefghijklmnopqrstuvwxyz":
        table[getattr(pygame, f"K_{letter}")] = Key[letter.upper()]
    for digit in range(10):
        table[getattr(pygame, f"K_{digit}")] = Key[f"DIGIT_{digit}"]
        code = _first_attr((f"K_KP{digit}", f"K_KP_{digit}"))
        if code is not None:
            table[code] = Key[f"KP_{digit}"]
    for number in range(1, 26):
        code = _first_attr((f"K_F{number}",))
        if code is not None:
            table[code] = Key[f"F{number}"]
    for names, key in _NAMED_KEYS:
        code = _first_attr(names)
        if code is not None:
            table.setdefault(code, key)
    return table


_KEY_TABLE = _build_key_table()
_MODIFIER_TABLE = [
    (mask, flag) for names, flag in _MODIFIERS if (mask := _first_attr(names)) is not None
]


def translate_key(pygame_key: int) -> Optional[Key]:
    """Return the key code for a pygame key constant, or None if unknown."""
    return _KEY_TABLE.get(pygame_key)


def translate_action(event_type: int) -> Optional[Action]:
    """Return the key action for a pygame event type, or None for other events."""
    if event_type == pygame.KEYDOWN:
        return Action.PRESS
    if event_type == pygame.KEYUP:
        return Action.RELEASE
    return None


def _translate_modifiers(mod: int) -> Modifier:
    result = Modifier.NONE
    for mask, flag in _MODIFIER_TABLE:
        if mod & mask:
            result |= flag
    return result


def _handle_event(game: Game, event: pygame.event.Event) -> None:
    if event.type == pygame.QUIT:
        game.close()
        return
    action = translate_action(event.type)
    if action is None:
        return
    key = translate_key(event.key)
    if key is None:
        return
    keydata = KeyData(
        key,
        action,
        os_key=getattr(event, "scancode", 0),
        modifier=_translate_modifiers(getattr(event, "mod", 0)),
    )
    game.key_input(keydata)


def _draw(screen: pygame.Surface, game: Game) -> None:
    screen.fill((0, 0, 0))
    image = game.image
    if image.enabled:
        surface = pygame.image.frombuffer(
            bytes(image.pixels), (image.width, image.height), "RGBA"
        )
        for instance in sorted(image.instances, key=lambda inst: inst.z):
            if instance.enabled:
                screen.blit(surface, (instance.x, instance.y))
    pygame.display.flip()


def run(game: Game, max_frames: Optional[int] = None) -> int:
    """Run the main loop until the game closes or ``max_frames`` pass.

    Returns the number of frames drawn.
    """
    rng = random.Random()
    frames = 0
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width, game.height), pygame.RESIZABLE)
        pygame.display.set_caption(game.title)
        clock = pygame.time.Clock()
        while game.running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                _handle_event(game, event)
            if not game.running:
                break
            game.frame(rng)
            _draw(screen, game)
            clock.tick(FPS)
            frames += 1
    finally:
        pygame.quit()
    return frames


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="pixelpad", description="Move a noisy square with WASD.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    game = game_init()
    run(game, args.frames)
    return 0