"""Planes described by a unit normal and an offset."""

from __future__ import annotations

from dataclasses import dataclass, field

from rigsmith.vec3 import Vec3


@dataclass(frozen=True)
class Plane:
    """The plane of points p with normal . p + distance == 0."""

    normal: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    distance: float = 0.0

    def distance_to_point(self, point: Vec3) -> float:
        return abs(self.normal.dot(point) + self.distance)

    @classmethod
    def from_points(cls, a: Vec3, b: Vec3, c: Vec3) -> Plane:
        return cls.from_normal_and_point((b - a).cross(c - a).normalized(), a)

    @classmethod
    def from_normal_and_point(cls, normal: Vec3, point: Vec3) -> Plane:
        unit = normal.normalized()
        return cls(unit, -point.dot(unit))