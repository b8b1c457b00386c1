"""Sorted collections of contiguous, non-overlapping data ranges."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Range(Generic[T]):
    """A run of values starting at index ``first``."""

    first: int = 0
    data: list[T] = field(default_factory=list)

    @property
    def last(self) -> int:
        """Index one past the final element."""
        return self.first + len(self.data)

    def contains(self, index: int) -> bool:
        return self.first <= index < self.last

    def intersects(self, other: Range[T]) -> bool:
        """True when the ranges overlap or one starts where the other ends."""
        return (
            self.contains(other.first)
            or self.contains(other.last)
            or other.contains(self.first)
            or other.contains(self.last)
        )

    def merge(self, other: Range[T]) -> None:
        """Absorb ``other`` into this range; its values win where they overlap.

        Ranges that do not intersect are left unchanged.
        """
        if not self.intersects(other):
            return
        if self.first < other.first:
            offset = other.first - self.first
            if self.last <= other.last:
                self.data = self.data[:offset] + list(other.data)
            else:
                self.data = (
                    self.data[:offset]
                    + list(other.data)
                    + self.data[offset + len(other.data):]
                )
        elif self.last > other.last:
            self.data = list(other.data) + self.data[other.last - self.first:]
            self.first = other.first
        else:
            self.first = other.first
            self.data = list(other.data)

    def copy(self) -> Range[T]:
        return Range(self.first, list(self.data))


class RangeArray(Generic[T]):
    """Ranges kept in ascending order, merged whenever they touch."""

    def __init__(self) -> None:
        self._ranges: list[Range[T]] = []

    def add(self, other: Range[T]) -> None:
        """Insert a copy of ``other``, merging it with ranges it touches."""
        added = other.copy()
        position: int | None = None
        for index, existing in enumerate(self._ranges):
            if added.last < existing.first:
                self._ranges.insert(index, added)
                position = index
                break
            if existing.intersects(added):
                existing.merge(added)
                position = index
                break

        if position is None:
            self._ranges.append(added)
            return

        while (
            position + 1 < len(self._ranges)
            and self._ranges[position].last >= self._ranges[position + 1].first
        ):
            self._ranges[position + 1].merge(self._ranges[position])
            del self._ranges[position]

    def clear(self) -> None:
        self._ranges.clear()

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[Range[T]]:
        return iter(self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)