"""Routing of key events to per-key handlers."""

from __future__ import annotations

from typing import Any, Callable

from pixelpad.keys import Key, KeyData

KeyHandler = Callable[[KeyData, Any], None]


class KeyDispatcher:
    """Maps keys to handlers and calls the one registered for each event."""

    def __init__(self) -> None:
        self._handlers: dict[Key, KeyHandler] = {}

    def __contains__(self, key: object) -> bool:
        try:
            return Key(key) in self._handlers  # type: ignore[arg-type]
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._handlers)

    def add(self, key: Key | int, handler: KeyHandler) -> None:
        """Register ``handler`` for ``key``, replacing any earlier one."""
        self._handlers[Key(key)] = handler

    def remove(self, key: Key | int) -> None:
        """Forget the handler for ``key``; a key without one is left as is."""
        self._handlers.pop(Key(key), None)

    def handle(self, keydata: KeyData, context: Any) -> bool:
        """Call the handler for the event's key, if any; return whether one ran."""
        handler = self._handlers.get(keydata.key)
        if handler is None:
            return False
        handler(keydata, context)
        return True