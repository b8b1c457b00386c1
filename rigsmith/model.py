"""Triangle and wireframe mesh data."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rigsmith.vec3 import Vec3


@dataclass
class Vertex:
    """A mesh vertex with texture coordinates and a material slot."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    u: float = 0.0
    v: float = 0.0
    material_index: int = 0

    def position(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


def _indices(values: Sequence[int], count: int, kind: str) -> tuple[int, ...]:
    result = tuple(int(value) for value in values)
    if len(result) != count:
        raise ValueError(f"{kind} needs {count} vertex indices, got {len(result)}")
    return result


@dataclass(frozen=True)
class Face:
    """A triangle given by three vertex indices."""

    vertexes: tuple[int, int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertexes", _indices(self.vertexes, 3, "face"))


@dataclass(frozen=True)
class Edge:
    """A segment given by two vertex indices."""

    vertexes: tuple[int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertexes", _indices(self.vertexes, 2, "edge"))


@dataclass
class Model:
    """A triangle mesh with material names and bone weight links."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    materials: list[str] = field(default_factory=list)
    vlinks: dict[int, set[str]] = field(default_factory=dict)
    blinks: dict[str, list[tuple[int, float]]] = field(default_factory=dict)


@dataclass
class WireframeModel:
    """A mesh drawn as edges."""

    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)