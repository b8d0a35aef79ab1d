# pixelpad

pixelpad opens an 800×600 window titled "Name Goes here" that holds a
100×100 square of random coloured noise. The noise is redrawn on every frame,
and you move the square around the window with the keyboard.

## Installing

```
pip install .
```

This also installs pygame, which pixelpad uses for the window and the
keyboard.

## Running

```
pixelpad
```

| Key    | Effect                         |
|--------|--------------------------------|
| W      | move up while held             |
| S      | move down while held           |
| A      | move left while held           |
| D      | move right while held          |
| Escape | close the window               |

The square moves 5 pixels per frame in each direction that is held down.
Closing the window also ends the program. The loop runs at up to 60 frames
per second.

To stop on its own after a fixed number of frames:

```
pixelpad --frames 300
```

`--frames` must not be negative.

## Using it as a library

Key handling is done by a jump table that maps each key to a handler.
Handlers receive a `KeyData` and the game:

```python
from pixelpad.game import game_init
from pixelpad.keys import Action, Key, KeyData

game = game_init(800, 600, "Sandbox")
game.key_input(KeyData(key=Key.D, action=Action.PRESS))
game.update_state()
print(game.image.instances[0].x)  # 5
```

The modules:

- `pixelpad.keys` — `Key` (key codes), `Action` (`PRESS`, `RELEASE`,
  `REPEAT`), `Modifier` (combinable flags) and the frozen `KeyData` event.
  Plain integers given to `KeyData` are converted to these enums; unknown
  values raise `ValueError`.
- `pixelpad.image` — `pixel(r, g, b, a)` packs a 32-bit RGBA colour;
  `Image(width, height)` is an RGBA byte buffer with `put_pixel`,
  `get_pixel` (both raise `IndexError` outside the image) and
  `add_instance(x, y)`, which places an `Instance` and returns its index.
- `pixelpad.events` — `InputState` and the handlers `close_window`,
  `move_up`, `move_down`, `move_left` and `move_right`. A move flag is set on
  press and cleared on release; repeats leave it as it is.
- `pixelpad.dispatch` — `KeyDispatcher`, with `add(key, handler)`,
  `remove(key)` and `handle(keydata, context)`, which returns whether a
  handler was called.
- `pixelpad.game` — `Game`, with `close`, `key_input`, `update_state`,
  `randomize(rng)` and `frame(rng)`; and `game_init(width, height, title)`,
  which places the image at the origin and binds Escape and WASD.
- `pixelpad.app` — `translate_key` and `translate_action` turn pygame key
  codes and event types into `Key` and `Action` values (or `None`);
  `run(game, max_frames)` runs the window loop and returns the number of
  frames drawn; `main(argv)` is the `pixelpad` command.

## What it does not do

pixelpad only reacts to the keyboard and to the window being closed. It has
no mouse, cursor, scroll or resize handling, does not load images from files
and does not draw text. The window can be resized, but the square keeps its
size.

## Tests

```
pip install .[test]
pytest
```