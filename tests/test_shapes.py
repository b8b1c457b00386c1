import math
from collections import Counter

import pytest

from rigsmith.hull import convex_hull
from rigsmith.model import Face, Vertex
from rigsmith.shapes import Box, ConvexHull, Shape, Sphere
from rigsmith.vec3 import Vec3


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_box_vertices_sit_on_half_size():
    size = Vec3(2.0, 4.0, 6.0)
    model = Box(size).model()
    for vertex in model.vertices:
        assert abs(vertex.x) * 2 == size.x
        assert abs(vertex.y) * 2 == size.y
        assert abs(vertex.z) * 2 == size.z
    assert len({v.position() for v in model.vertices}) == len(model.vertices)
    assert model.materials == [""]


def test_box_faces_from_table_and_closed():
    model = Box(Vec3(1.0, 1.0, 1.0)).model()
    assert model.faces[0] == Face((0, 1, 2))
    assert model.faces[-1] == Face((3, 7, 2))
    counts = Counter()
    for face in model.faces:
        a, b, c = face.vertexes
        for p, q in ((a, b), (b, c), (c, a)):
            counts[frozenset((p, q))] += 1
    assert set(counts.values()) == {2}


def test_default_box_collapses_to_origin():
    model = Box().model()
    assert all(v.position() == Vec3() for v in model.vertices)


def test_sphere_vertices_lie_on_radius():
    radius = 2.5
    model = Sphere(radius).model()
    for vertex in model.vertices:
        assert vertex.position().length() == pytest.approx(radius)
        assert vertex.u in (0.0, 0.25, 0.5, 0.75)
        assert vertex.v in (0.0, 0.25, 0.5, 0.75)


def test_sphere_counts_and_indices():
    model = Sphere(1.0).model()
    assert len(model.vertices) == 128
    assert len(model.faces) == 210
    assert all(0 <= i < len(model.vertices) for face in model.faces for i in face.vertexes)
    assert model.materials == [""]


def test_sphere_segment_step_uses_whole_degrees():
    model = Sphere(1.0).model()
    second = model.vertices[1]
    assert math.degrees(math.atan2(second.z, second.x)) == pytest.approx(22)
    assert model.vertices[0].position() == Vec3(1.0, 0.0, 0.0)


def test_convex_hull_shape_matches_hull_of_positions():
    vertices = [
        Vertex(0, 0, 0, 0.3, 0.1, 2),
        Vertex(10, 0, 0),
        Vertex(0, 10, 0),
        Vertex(0, 0, 10),
        Vertex(1, 1, 1),
    ]
    shape = ConvexHull(vertices)
    model = shape.model()
    assert model == convex_hull([v.position() for v in vertices])
    assert {v.position() for v in model.vertices} <= {v.position() for v in vertices}


def test_convex_hull_shape_too_few_points():
    with pytest.raises(ValueError):
        ConvexHull([Vertex(0, 0, 0), Vertex(1, 0, 0)]).model()