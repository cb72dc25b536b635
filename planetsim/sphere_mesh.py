"""Triangle-strip sphere mesh with texture coordinates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple

from planetsim.affine import Point, Vector

_PI = 3.1415926535897
_STEP = 10
_RADIUS = 1.0
# Corner offsets (longitude, latitude) emitted for each patch of the strip.
_CORNERS = ((0, 0), (0, _STEP), (_STEP, 0), (_STEP, _STEP))


class Face(NamedTuple):
    """A triangle given by three vertex indices."""

    index1: int
    index2: int
    index3: int


class Edge(NamedTuple):
    """A line segment given by two vertex indices."""

    index1: int
    index2: int


class Mesh(ABC):
    """A sequence of vertices that can be drawn."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def vertex(self, index: int) -> Point:
        """Vertex at the given index."""

    def __iter__(self) -> Iterator[Point]:
        return (self.vertex(i) for i in range(len(self)))


def _corner(longitude: int, latitude: int) -> tuple[Point, tuple[float, float]]:
    a = longitude / 180 * _PI
    b = latitude / 180 * _PI
    point = Point(
        _RADIUS * math.sin(a) * math.sin(b),
        _RADIUS * math.cos(a) * math.sin(b),
        _RADIUS * math.cos(b),
    )
    return point, (longitude / 360, (2 * latitude) / 360)


class SphereMesh(Mesh):
    """Unit sphere laid out as a triangle strip in 10-degree patches."""

    def __init__(self):
        self.center = Point(0, 0, 0)
        self.scale = Vector(1, 1, 1)
        self.dimensions = Vector(2, 2, 2)
        vertices = []
        uvs = []
        for latitude in range(0, 180, _STEP):
            for longitude in range(0, 360, _STEP):
                for d_long, d_lat in _CORNERS:
                    point, uv = _corner(longitude + d_long, latitude + d_lat)
                    vertices.append(point)
                    uvs.append(uv)
        self._vertices = tuple(vertices)
        self._uvs = tuple(uvs)

    def __len__(self) -> int:
        return len(self._vertices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex index {index} out of range")

    def vertex(self, index: int) -> Point:
        """Vertex at the given index."""
        self._check(index)
        return self._vertices[index]

    def uv(self, index: int) -> tuple[float, float]:
        """Texture coordinates (u, v) of the vertex at the given index."""
        self._check(index)
        return self._uvs[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)