"""Rotation quaternions in the editor's Z-up coordinate system."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from rigsmith.angle import Angle
from rigsmith.matrix import Matrix
from rigsmith.rotor import Rotor3
from rigsmith.vec3 import Vec3


@dataclass(frozen=True)
class Quaternion:
    """A quaternion x*i + y*j + z*k + w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def _rotation(self) -> Matrix:
        return Matrix.rotate_quaternion(Matrix.identity(4), self)

    def x_axis(self) -> Vec3:
        m = self._rotation()
        return Vec3(m[0, 0], m[1, 0], m[2, 0])

    def y_axis(self) -> Vec3:
        m = self._rotation()
        return Vec3(m[0, 1], m[1, 1], m[2, 1])

    def z_axis(self) -> Vec3:
        m = self._rotation()
        return Vec3(m[0, 2], m[1, 2], m[2, 2])

    def to_gl(self) -> tuple[float, float, float, float]:
        """Components (w, x, y, z) in the Y-up renderer convention."""
        return (self.w, self.y, self.z, -self.x)

    @classmethod
    def from_gl(cls, other: Sequence[float]) -> Quaternion:
        """Build from renderer components given as (w, x, y, z)."""
        w, gl_x, gl_y, gl_z = other
        return cls(-gl_z, gl_x, gl_y, w)

    def to_euler(self) -> Rotor3:
        x, y, z, w = self.x, self.y, self.z, self.w
        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        sinp = 2.0 * (w * y - z * x)
        if abs(sinp) >= 1.0:
            pitch = math.copysign(math.pi / 2.0, sinp)
        else:
            pitch = math.asin(sinp)
        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return Rotor3(
            roll=Angle.from_radians(roll),
            pitch=Angle.from_radians(pitch),
            yaw=Angle.from_radians(yaw),
        )

    @classmethod
    def from_euler(cls, angles: Rotor3) -> Quaternion:
        cy = math.cos(angles.yaw.radians * 0.5)
        sy = math.sin(angles.yaw.radians * 0.5)
        cp = math.cos(angles.pitch.radians * 0.5)
        sp = math.sin(angles.pitch.radians * 0.5)
        cr = math.cos(angles.roll.radians * 0.5)
        sr = math.sin(angles.roll.radians * 0.5)
        return cls(
            x=sr * cp * cy - cr * sp * sy,
            y=cr * sp * cy + sr * cp * sy,
            z=cr * cp * sy - sr * sp * cy,
            w=cr * cp * cy + sr * sp * sy,
        )