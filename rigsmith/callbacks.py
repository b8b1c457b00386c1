"""Ordered collections of callbacks addressed by integer ids."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class CallbackCollection:
    """Callbacks called in the order they were added."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[..., Any]] = {}
        self._next_id = 0

    def add(self, callback: Callable[..., Any]) -> int:
        """Register a callback and return its id."""
        callback_id = self._next_id
        self._callbacks[callback_id] = callback
        self._next_id += 1
        return callback_id

    def remove(self, callback_id: int) -> None:
        """Forget a callback; unknown ids are ignored."""
        self._callbacks.pop(callback_id, None)

    def __call__(self, *args: Any) -> None:
        for callback in list(self._callbacks.values()):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)