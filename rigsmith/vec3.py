"""Three-component vectors in the editor's Z-up coordinate system."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class Vec3Type(Enum):
    """How a vector is interpreted when converted to another coordinate system."""

    COORDS = "coords"
    SIZE = "size"


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def _combine(self, other: Vec3 | float, op: Callable[[float, float], float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Vec3 | float) -> Vec3:
        return self._combine(other, operator.add)

    def __sub__(self, other: Vec3 | float) -> Vec3:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Vec3 | float) -> Vec3:
        return self._combine(other, operator.truediv)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector gives NaN components."""
        size = self.length()
        if size == 0.0:
            return Vec3(math.nan, math.nan, math.nan)
        return Vec3(self.x / size, self.y / size, self.z / size)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )

    def triple(self, b: Vec3, c: Vec3) -> float:
        """Scalar triple product self . (b x c)."""
        return self.dot(b.cross(c))

    def dot(self, other: Vec3) -> float:
        return (self * other).components_sum()

    def components_sum(self) -> float:
        return self.x + self.y + self.z

    def to_gl(self, kind: Vec3Type = Vec3Type.COORDS) -> tuple[float, float, float]:
        """Convert to the Y-up renderer convention as an (x, y, z) tuple."""
        result = (self.y, self.z, -self.x)
        if kind is Vec3Type.SIZE:
            return (abs(result[0]), abs(result[1]), abs(result[2]))
        return result

    @classmethod
    def from_gl(cls, other: Sequence[float]) -> Vec3:
        """Build from a Y-up renderer (x, y, z) triple."""
        gl_x, gl_y, gl_z = other
        return cls(-gl_z, gl_x, gl_y)

    @classmethod
    def parse(cls, text: str) -> Vec3:
        """Read three whitespace-separated numbers."""
        parts = text.split()
        if len(parts) < 3:
            raise ValueError(f"expected three numbers, got {text!r}")
        x, y, z = (float(part) for part in parts[:3])
        return cls(x, y, z)