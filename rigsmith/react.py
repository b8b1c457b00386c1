"""Values that notify listeners when they are assigned."""

from __future__ import annotations

from typing import Generic, TypeVar

from rigsmith.callbacks import CallbackCollection

T = TypeVar("T")


class ReactValue(Generic[T]):
    """Holds a value and calls its callbacks with every new assignment."""

    def __init__(self, value: T | None = None) -> None:
        self._value = value
        self.callbacks = CallbackCollection()

    @property
    def value(self) -> T | None:
        return self._value

    def set(self, value: T) -> None:
        """Assign a value and notify the callbacks."""
        self._value = value
        self.callbacks(value)

    def move(self, value: T) -> None:
        """Assign a value without notifying anyone."""
        self._value = value