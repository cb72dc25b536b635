"""A textured body in the scene with its own orbit and spin."""

from __future__ import annotations

from planetsim.affine import (
    Matrix,
    Point,
    Vector,
    as_point,
    rot,
    scale,
    trans,
)
from planetsim.sphere_mesh import SphereMesh

_X = Vector(1, 0, 0)
_Y = Vector(0, 1, 0)
_Z = Vector(0, 0, 1)
_ORIGIN = Point(0, 0, 0)


def _euler(angles) -> Matrix:
    return rot(angles.x, _X) @ rot(angles.y, _Y) @ rot(angles.z, _Z)


class Body:
    """An object drawn from a sphere mesh.

    ``rotation`` and ``translation`` are applied about the world origin every
    frame (orbit); ``self_rotation`` and ``scale`` are applied about the
    body's own position (spin).
    """

    def __init__(self, object_id: int, texture_id: int):
        self.object_id = object_id
        self.texture_id = texture_id
        self.axis = Vector(0, 0, 0)
        self.angle = 0.0
        self.translation = Point(0, 0, 0)
        self.rotation = Point(0, 0, 0)
        self.scale = Vector(1, 1, 1)
        self.default_scale = Vector(1, 1, 1)
        self.default_rotation = Point(0, 0, 0)
        self.default_position = Point(0, 0, 0)
        self.self_rotation = Point(0, 0, 0)
        self.position = Point(0, 0, 0)
        self.initialized = False
        self.model_matrix = Matrix()
        self.basic_model_matrix = Matrix()

    def update_matrices(self, initialized: bool) -> Matrix:
        """Advance the body by one frame and return its model matrix."""
        if not initialized:
            self.basic_model_matrix = trans(self.default_position)
            ds = self.default_scale
            self.model_matrix = (
                self.basic_model_matrix
                @ _euler(self.default_rotation)
                @ scale(ds.x, ds.y, ds.z)
            )
            self.position = as_point(Point(0, 0, 0) + (self.default_position - _ORIGIN))

        step = trans(self.translation) @ _euler(self.rotation)
        self.basic_model_matrix = step @ self.basic_model_matrix
        s = self.scale
        self.model_matrix = (
            step
            @ trans(self.position - _ORIGIN)
            @ _euler(self.self_rotation)
            @ scale(s.x, s.y, s.z)
            @ trans(_ORIGIN - self.position)
            @ self.model_matrix
        )
        self.position = as_point(self.basic_model_matrix @ _ORIGIN)
        return self.model_matrix

    def draw_vertices(
        self,
        camera_matrix: Matrix,
        projection_matrix: Matrix,
        mesh: SphereMesh,
        initialized: bool,
    ) -> list[tuple[tuple[float, float], tuple[float, float, float]]]:
        """Advance one frame and return the visible vertices in device space.

        Each entry is ``((u, v), (x, y, z))``; vertices at or behind the
        camera plane are dropped.
        """
        model = self.update_matrices(initialized)
        to_camera = camera_matrix @ model
        to_device = projection_matrix @ camera_matrix @ model
        result = []
        for index, vertex in enumerate(mesh):
            if (to_camera @ vertex).z >= 0:
                continue
            projected = to_device @ vertex
            projected = scale(1.0 / projected.w) @ projected
            result.append((mesh.uv(index), (projected.x, projected.y, -projected.z)))
        return result