## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable
from collections import defaultdict


Listener = Callable[[Any], None]


class Emitter:
    """Synchronous publish/subscribe by event name."""

    def __init__(self):
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> Listener:
        self._listeners[event].append(listener)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        if listener in (registered := self._listeners.get(event, [])):
            registered.remove(listener)

    def listeners(self, event: str) -> list[Listener]:
        return list(self._listeners.get(event, []))

    def emit(self, event: str, value: Any) -> None:
        # Copy first, listeners may unsubscribe while being called.
        for listener in self.listeners(event):
            listener(value)
