"""Euler rotations made of roll, pitch and yaw angles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rigsmith.angle import Angle


@dataclass(frozen=True)
class Rotor3:
    """A rotation given as roll, pitch and yaw."""

    roll: Angle = field(default_factory=Angle)
    pitch: Angle = field(default_factory=Angle)
    yaw: Angle = field(default_factory=Angle)

    @classmethod
    def from_degrees(cls, roll: float, pitch: float, yaw: float) -> Rotor3:
        return cls(Angle.from_degrees(roll), Angle.from_degrees(pitch), Angle.from_degrees(yaw))

    @classmethod
    def from_angles(cls, pitch: Angle, yaw: Angle, roll: Angle) -> Rotor3:
        """Build from angles given in pitch, yaw, roll order."""
        return cls(roll=roll, pitch=pitch, yaw=yaw)

    def to_gl(self) -> tuple[float, float, float]:
        """Degrees in the Y-up renderer convention."""
        return (self.pitch.degrees, self.yaw.degrees, -self.roll.degrees)

    @classmethod
    def from_gl(cls, other: Sequence[float]) -> Rotor3:
        gl_x, gl_y, gl_z = other
        return cls.from_degrees(-gl_z, gl_x, gl_y)

    def _combine(self, other: Rotor3 | Angle, op_name: str) -> Rotor3:
        if isinstance(other, Rotor3):
            roll, pitch, yaw = other.roll, other.pitch, other.yaw
        elif isinstance(other, Angle):
            roll = pitch = yaw = other
        else:
            return NotImplemented
        return Rotor3.from_angles(
            getattr(self.roll, op_name)(roll),
            getattr(self.pitch, op_name)(pitch),
            getattr(self.yaw, op_name)(yaw),
        )

    def __add__(self, other: Rotor3 | Angle) -> Rotor3:
        return self._combine(other, "__add__")

    def __sub__(self, other: Rotor3 | Angle) -> Rotor3:
        return self._combine(other, "__sub__")

    def __mul__(self, other: Rotor3 | Angle) -> Rotor3:
        return self._combine(other, "__mul__")

    def __truediv__(self, other: Rotor3 | Angle) -> Rotor3:
        return self._combine(other, "__truediv__")