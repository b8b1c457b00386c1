"""Simple solid shapes that can produce a triangle mesh."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable

from rigsmith.angle import Angle
from rigsmith.hull import convex_hull
from rigsmith.model import Face, Model, Vertex
from rigsmith.vec3 import Vec3


class Shape(ABC):
    """A solid that can be turned into a mesh."""

    @abstractmethod
    def model(self) -> Model:
        """Triangle mesh of the shape."""


_BOX_FACES = (
    (0, 1, 2), (0, 2, 3),
    (0, 4, 3), (4, 3, 7),
    (1, 2, 5), (2, 5, 6),
    (4, 5, 6), (4, 7, 6),
    (0, 1, 5), (0, 4, 5),
    (2, 6, 7), (3, 7, 2),
)


class Box(Shape):
    """An axis-aligned box centred on the origin."""

    def __init__(self, size: Vec3 | None = None) -> None:
        self.size = size if size is not None else Vec3()

    def model(self) -> Model:
        hx, hy, hz = self.size / 2.0
        vertices = [
            Vertex(-hx, hy, hz, 0.0, 0.0, 0),
            Vertex(-hx, hy, -hz, 1.0, 0.0, 0),
            Vertex(hx, hy, -hz, 1.0, 1.0, 0),
            Vertex(hx, hy, hz, 0.0, 1.0, 0),
            Vertex(-hx, -hy, hz, 1.0, 0.0, 0),
            Vertex(-hx, -hy, -hz, 0.0, 0.0, 0),
            Vertex(hx, -hy, -hz, 0.0, 1.0, 0),
            Vertex(hx, -hy, hz, 1.0, 1.0, 0),
        ]
        return Model(
            vertices=vertices,
            faces=[Face(indices) for indices in _BOX_FACES],
            materials=[""],
        )


class Sphere(Shape):
    """A UV sphere of 16 segments centred on the origin."""

    SEGMENTS = 16

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def model(self) -> Model:
        segments = self.SEGMENTS
        rings = segments // 2
        segment_step = Angle.from_degrees(360 // segments).radians
        ring_step = Angle.from_degrees(360 / (segments / 2.0)).radians
        result = Model(materials=[""])

        for ring in range(rings):
            ring_angle = ring * ring_step
            for segment in range(segments):
                segment_angle = segment * segment_step
                result.vertices.append(
                    Vertex(
                        math.cos(segment_angle) * math.cos(ring_angle) * self.radius,
                        math.sin(ring_angle) * math.cos(segment_angle) * self.radius,
                        math.sin(segment_angle) * self.radius,
                        (ring % 4) * 0.25,
                        (segment % 4) * 0.25,
                        0,
                    )
                )

        for ring in range(rings - 1):
            for segment in range(segments - 1):
                current = ring * segments + segment
                result.faces.append(Face((current, current + 1, current + segments)))
                result.faces.append(
                    Face((current + 1, current + segments, current + segments + 1))
                )
        return result


class ConvexHull(Shape):
    """The convex hull of a set of mesh vertices."""

    def __init__(self, vertices: Iterable[Vertex]) -> None:
        self.vertices = list(vertices)

    def model(self) -> Model:
        return convex_hull(vertex.position() for vertex in self.vertices)