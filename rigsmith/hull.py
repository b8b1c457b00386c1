"""Convex hulls of point clouds, built incrementally from a starting tetrahedron."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from rigsmith.line import Line
from rigsmith.model import Face, Model, Vertex
from rigsmith.plane import Plane
from rigsmith.vec3 import Vec3

_FLT_EPSILON = 1.1920928955078125e-07
_FLAT_TRIPLE = 0.00001


class _Side(Enum):
    SAME = auto()
    DIFFERENT = auto()
    FIRST_ON_PLANE = auto()
    SECOND_ON_PLANE = auto()
    BOTH_ON_PLANE = auto()


@dataclass(eq=False)
class _Triangle:
    a: int
    b: int
    c: int
    order: int
    points: set[int] = field(default_factory=set)
    neighbors: set[_Triangle] = field(default_factory=set)

    @property
    def corners(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)


def _by_order(triangles: Iterable[_Triangle]) -> list[_Triangle]:
    return sorted(triangles, key=lambda triangle: triangle.order)


@dataclass
class _Horizon:
    triangles: set[_Triangle]
    edges: list[tuple[tuple[int | None, int | None], _Triangle]]


class _HullBuilder:
    def __init__(self, points: list[Vec3]) -> None:
        self.points = points
        self.triangles: list[_Triangle] = []
        self._counter = itertools.count()

    def new_triangle(self, a: int, b: int, c: int) -> _Triangle:
        triangle = _Triangle(a, b, c, next(self._counter))
        self.triangles.append(triangle)
        return triangle

    def positions(self, triangle: _Triangle) -> tuple[Vec3, Vec3, Vec3]:
        return (self.points[triangle.a], self.points[triangle.b], self.points[triangle.c])

    def plane(self, triangle: _Triangle) -> Plane:
        return Plane.from_points(*self.positions(triangle))

    def center(self) -> Vec3:
        unique = sorted({corner for triangle in self.triangles for corner in triangle.corners})
        total = Vec3()
        for index in unique:
            total = total + self.points[index]
        return total / float(len(unique))

    def side(self, triangle: _Triangle, first: Vec3, second: Vec3) -> _Side:
        a, b, c = self.positions(triangle)

        def triple(point: Vec3) -> float:
            value = (a - point).triple(a - b, a - c)
            if abs(value) < _FLAT_TRIPLE:
                if Plane.from_points(a, b, c).distance_to_point(point) <= _FLT_EPSILON:
                    return 0.0
            return value

        tpa = triple(first)
        tpb = triple(second)
        if tpa == 0.0 and tpb == 0.0:
            return _Side.BOTH_ON_PLANE
        if tpa == 0.0:
            return _Side.FIRST_ON_PLANE
        if tpb == 0.0:
            return _Side.SECOND_ON_PLANE
        if tpa * tpb > 0.0:
            return _Side.SAME
        return _Side.DIFFERENT

    def is_corner(self, triangle: _Triangle, index: int) -> bool:
        point = self.points[index]
        return any(self.points[corner] == point for corner in triangle.corners)

    def shared_edge(self, first: _Triangle, second: _Triangle) -> tuple[int | None, int | None]:
        shared = [corner for corner in first.corners if self.is_corner(second, corner)][:2]
        shared.extend([None] * (2 - len(shared)))
        return (shared[0], shared[1])

    def horizon(self, start: _Triangle, point: Vec3, center: Vec3) -> _Horizon:
        edges: list[tuple[tuple[int | None, int | None], _Triangle]] = []
        done: set[_Triangle] = set()
        history: list[tuple[_Triangle, set[_Triangle]]] = [(start, set())]

        while history:
            while True:
                current, checked = history[-1]
                done.add(current)
                last_done = current
                for neighbor in _by_order(current.neighbors):
                    if neighbor in done or neighbor in checked:
                        continue
                    checked.add(neighbor)
                    if self.side(neighbor, point, center) is _Side.SAME:
                        edges.append((self.shared_edge(current, neighbor), neighbor))
                    else:
                        history.append((neighbor, set()))
                        break
                if last_done is history[-1][0]:
                    break
            history.pop()
        return _Horizon(done, edges)

    def assign_points(self, triangles: Iterable[_Triangle], pending: set[int], center: Vec3) -> None:
        for triangle in _by_order(triangles):
            for index in sorted(pending):
                side = self.side(triangle, center, self.points[index])
                if side is _Side.DIFFERENT:
                    triangle.points.add(index)
                    pending.discard(index)
                elif side is not _Side.SAME:
                    pending.discard(index)


def _farthest(candidates: Iterable[int], distance) -> int:
    best_distance = -math.inf
    best: int | None = None
    for index in sorted(candidates):
        value = distance(index)
        if value > best_distance:
            best_distance = value
            best = index
    if best is None:
        raise ValueError("points are degenerate; no convex hull can be built")
    return best


def convex_hull(vertices: Iterable[Vec3]) -> Model:
    """Triangulated convex hull of the points, one material and three vertices per face.

    Only runs of equal consecutive points are merged. At least four distinct
    points are needed.
    """
    points: list[Vec3] = []
    for vertex in vertices:
        if not points or points[-1] != vertex:
            points.append(vertex)
    if len(points) < 4:
        raise ValueError(f"a convex hull needs at least four points, got {len(points)}")

    indices = range(len(points))
    selected = [
        min(indices, key=lambda i: points[i].x),
        max(indices, key=lambda i: points[i].x),
        min(indices, key=lambda i: points[i].y),
        max(indices, key=lambda i: points[i].y),
        min(indices, key=lambda i: points[i].z),
        max(indices, key=lambda i: points[i].z),
    ]

    best_distance = -math.inf
    first, second = selected[0], selected[1]
    for i, j in itertools.combinations(selected, 2):
        delta = points[i] - points[j]
        distance = abs(delta.x) + abs(delta.y) + abs(delta.z)
        if distance > best_distance:
            best_distance = distance
            first, second = i, j

    available = set(indices)
    available.discard(first)
    available.discard(second)

    axis = Line(points[first], points[second])
    third = _farthest(available, lambda i: axis.distance_to_point(points[i]))
    available.discard(third)

    builder = _HullBuilder(points)
    base = builder.new_triangle(first, second, third)
    base_plane = builder.plane(base)
    apex = _farthest(available, lambda i: base_plane.distance_to_point(points[i]))
    available.discard(apex)

    builder.new_triangle(base.a, base.b, apex)
    builder.new_triangle(base.b, base.c, apex)
    builder.new_triangle(base.c, base.a, apex)
    for one in builder.triangles:
        one.neighbors.update(other for other in builder.triangles if other is not one)

    pending = set(available)
    added: list[_Triangle] = list(builder.triangles)
    while pending or any(triangle.points for triangle in builder.triangles):
        center = builder.center()
        builder.assign_points(added, pending, center)

        if not any(triangle.points for triangle in builder.triangles):
            break

        max_distance = -math.inf
        far_triangle: _Triangle | None = None
        far_point: int | None = None
        for triangle in builder.triangles:
            plane = builder.plane(triangle)
            for index in sorted(triangle.points):
                distance = plane.distance_to_point(points[index])
                if distance > max_distance:
                    far_triangle, far_point, max_distance = triangle, index, distance
        if far_triangle is None or far_point is None:
            raise ValueError("points are degenerate; no convex hull can be built")

        horizon = builder.horizon(far_triangle, points[far_point], center)

        added = []
        for (edge_a, edge_b), hidden in horizon.edges:
            if edge_a is None or edge_b is None:
                continue
            created = builder.new_triangle(edge_a, edge_b, far_point)
            added.append(created)
            hidden.neighbors.add(created)
            created.neighbors.add(hidden)

        for one, other in itertools.combinations(added, 2):
            edge_a, edge_b = builder.shared_edge(one, other)
            if edge_a is not None and edge_b is not None:
                one.neighbors.add(other)
                other.neighbors.add(one)

        pending = set()
        for removed in horizon.triangles:
            pending |= removed.points
            removed.points = set()
            for neighbor in removed.neighbors:
                neighbor.neighbors.discard(removed)
        builder.triangles = [t for t in builder.triangles if t not in horizon.triangles]

    result = Model(materials=[""])
    for triangle in builder.triangles:
        a, b, c = builder.positions(triangle)
        start = len(result.vertices)
        result.vertices.extend(
            [
                Vertex(a.x, a.y, a.z, 0.0, 0.0, 0),
                Vertex(b.x, b.y, b.z, 1.0, 0.0, 0),
                Vertex(c.x, c.y, c.z, 0.0, 1.0, 0),
            ]
        )
        result.faces.append(Face((start, start + 1, start + 2)))
    return result