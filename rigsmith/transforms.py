"""Helpers combining rotations, quaternions and matrices."""

from __future__ import annotations

import math

from rigsmith.matrix import Matrix
from rigsmith.quaternion import Quaternion
from rigsmith.rotor import Rotor3
from rigsmith.vec3 import Vec3


def rotate(origin: Vec3, rot: Rotor3) -> Vec3:
    """Rotate a point by roll about Z, then yaw about Y, then pitch about the turned Z axis."""
    y_axis = Vec3(0.0, 1.0, 0.0)
    z_axis = Vec3(0.0, 0.0, 1.0)

    transform = Matrix.rotate_axis(Matrix.identity(4), z_axis, rot.roll)
    z_axis = Matrix.apply(transform, z_axis)

    transform = Matrix.rotate_axis(transform, y_axis, rot.yaw)
    z_axis = Matrix.apply(transform, z_axis)

    transform = Matrix.rotate_axis(transform, z_axis, rot.pitch)
    return Matrix.apply(transform, origin)


def quaternion_from_matrix(matrix: Matrix) -> Quaternion:
    """Quaternion of the rotation held in the upper 3x3 block of a matrix."""
    m = matrix
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        return Quaternion(
            x=(m[2, 1] - m[1, 2]) * s,
            y=(m[0, 2] - m[2, 0]) * s,
            z=(m[1, 0] - m[0, 1]) * s,
            w=0.25 / s,
        )
    if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
        return Quaternion(
            x=0.25 * s,
            y=(m[0, 1] + m[1, 0]) / s,
            z=(m[0, 2] + m[2, 0]) / s,
            w=(m[2, 1] - m[1, 2]) / s,
        )
    if m[1, 1] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
        return Quaternion(
            x=(m[0, 1] + m[1, 0]) / s,
            y=0.25 * s,
            z=(m[1, 2] + m[2, 1]) / s,
            w=(m[0, 2] - m[2, 0]) / s,
        )
    s = 2.0 * math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
    return Quaternion(
        x=(m[0, 2] + m[2, 0]) / s,
        y=(m[1, 2] + m[2, 1]) / s,
        z=0.25 * s,
        w=(m[1, 0] - m[0, 1]) / s,
    )