"""Camera-space and perspective projection matrices."""

from __future__ import annotations

from planetsim.affine import Affine, Matrix
from planetsim.camera import Camera


def camera_to_world(cam: Camera) -> Affine:
    """Transform from camera coordinates to world coordinates."""
    return cam.camera_to_world()


def world_to_camera(cam: Camera) -> Affine:
    """Transform from world coordinates to camera coordinates."""
    return cam.world_to_camera()


def camera_to_ndc(cam: Camera) -> Matrix:
    """Perspective matrix from camera space to normalized device coordinates."""
    geometry = cam.viewport_geometry()
    w, h, d = geometry.x, geometry.y, geometry.z
    n, f = cam.near, cam.far
    return Matrix(
        [
            [2 * d / w, 0.0, 0.0, 0.0],
            [0.0, 2 * d / h, 0.0, 0.0],
            [0.0, 0.0, (n + f) / (n - f), 2 * n * f / (n - f)],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )