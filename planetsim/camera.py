"""A movable 3D camera with an orthonormal frame."""

from __future__ import annotations

import math

from planetsim.affine import (
    Affine,
    Hcoords,
    Matrix,
    Point,
    Vector,
    as_point,
    as_vector,
    cross,
    inverse,
    norm,
    rot,
)


def _unit(v: Hcoords) -> Vector:
    length = norm(v)
    if length == 0:
        raise ValueError("cannot take the direction of a zero vector")
    return as_vector((1 / length) * v)


class Camera:
    """Camera holding eye position, frame axes and viewport geometry."""

    def __init__(self):
        self.right = Vector(1, 0, 0)
        self.up = Vector(0, 1, 0)
        self.back = Vector(0, 0, 1)
        self.eye = Point(0, 0, 0)
        self.near = 0.1
        self.far = 10.0
        self.distance = 1.0
        self.width = 2.0
        self.height = 2.0
        self.matrix = Affine()

    @classmethod
    def looking(cls, eye, look, vp, fov, aspect, near, far) -> "Camera":
        """Camera at eye looking along look, with vp as the rough up direction."""
        cam = cls()
        cam.eye = as_point(eye)
        cam.back = _unit(-look)
        cam.right = _unit(cross(look, vp))
        cam.up = _unit(cross(cam.back, cam.right))
        cam.near = float(near)
        cam.far = float(far)
        cam.distance = 1.0
        cam.width = math.tan(fov / 2) * 2 * cam.distance
        cam.height = cam.width / aspect
        return cam

    def viewport_geometry(self) -> Vector:
        """Return (width, height, distance) of the viewport."""
        return Vector(self.width, self.height, self.distance)

    def zoom(self, factor: float) -> "Camera":
        self.width *= factor
        self.height *= factor
        return self

    def forward(self, distance: float) -> "Camera":
        """Move the eye along the viewing direction."""
        self.eye = as_point(self.eye - distance * self.back)
        return self

    def yaw(self, angle: float) -> "Camera":
        """Turn about the up axis."""
        turn = rot(angle, self.up)
        self.right = as_vector(turn @ self.right)
        self.back = as_vector(turn @ self.back)
        return self

    def pitch(self, angle: float) -> "Camera":
        """Turn about the right axis."""
        turn = rot(angle, self.right)
        self.up = as_vector(turn @ self.up)
        self.back = as_vector(turn @ self.back)
        return self

    def roll(self, angle: float) -> "Camera":
        """Turn about the back axis."""
        turn = rot(angle, self.back)
        self.up = as_vector(turn @ self.up)
        self.right = as_vector(turn @ self.right)
        return self

    def camera_to_world(self) -> Affine:
        return Affine.from_columns(self.right, self.up, self.back, self.eye)

    def world_to_camera(self) -> Affine:
        return inverse(self.camera_to_world())

    def multiply_matrix(self, matrix: Matrix) -> None:
        """Premultiply the stored matrix by the given affine transform."""
        self.matrix = Affine.from_matrix(matrix @ self.matrix)

    def change_eye(self, x: float, y: float, z: float) -> None:
        """Move the eye by an offset given in the camera's own frame."""
        offset = x * self.right + y * self.up + z * self.back
        self.eye = as_point(self.eye + offset)

    def rotate_camera(self, x: float, y: float, z: float) -> None:
        """Rotate about local right, then up, then back axes."""
        self.up = as_vector(rot(x, self.right) @ self.up)
        self.back = as_vector(rot(x, self.right) @ self.back)
        self.right = as_vector(rot(y, self.up) @ self.right)
        self.back = as_vector(rot(y, self.up) @ self.back)
        self.up = as_vector(rot(z, self.back) @ self.up)
        self.right = as_vector(rot(z, self.back) @ self.right)