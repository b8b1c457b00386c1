"""Angles stored in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Angle:
    """An angle held in degrees."""

    degrees: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(radians * 180.0 / math.pi)

    @property
    def radians(self) -> float:
        return self.degrees * math.pi / 180.0

    def normalized(self) -> Angle:
        """Remainder of the angle modulo 360, keeping the sign of the original."""
        return Angle(math.fmod(self.degrees, 360.0))

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees + other.degrees)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees - other.degrees)

    def __mul__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees * other.degrees)

    def __truediv__(self, other: Angle | int | float) -> Angle:
        if isinstance(other, Angle):
            return Angle(self.degrees / other.degrees)
        if isinstance(other, (int, float)):
            return Angle(self.degrees / other)
        return NotImplemented

    def __lt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.degrees < other.degrees

    def __le__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.degrees <= other.degrees

    def __gt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.degrees > other.degrees

    def __ge__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.degrees >= other.degrees