import math

import pytest

from planetsim.affine import Hcoords, Point, Vector
from planetsim.camera import Camera
from planetsim.projection import camera_to_ndc, camera_to_world, world_to_camera


def make_camera():
    return Camera.looking(Point(0, 0, 50), Vector(0, 0, -1), Vector(0, 1, 0),
                          0.5 * math.pi, 1, 0.01, 1.0)


def divide(h):
    return [h.x / h.w, h.y / h.w, h.z / h.w]


def test_world_transforms_match_camera():
    cam = make_camera().yaw(0.2)
    assert camera_to_world(cam) == cam.camera_to_world()
    assert world_to_camera(cam) == cam.world_to_camera()


def test_ndc_last_row():
    assert camera_to_ndc(Camera())[3] == Hcoords(0, 0, -1, 0)


def test_near_and_far_planes():
    cam = Camera()
    ndc = camera_to_ndc(cam)
    near_z = divide(ndc @ Point(0, 0, -cam.near))[2]
    far_z = divide(ndc @ Point(0, 0, -cam.far))[2]
    assert near_z == pytest.approx(-1.0)
    assert far_z == pytest.approx(1.0)


def test_viewport_edge_maps_to_unit():
    cam = Camera().zoom(1.5)
    ndc = camera_to_ndc(cam)
    x = divide(ndc @ Point(cam.width / 2, 0, -cam.distance))[0]
    assert x == pytest.approx(1.0)


def test_point_ahead_projects_to_center():
    cam = make_camera()
    ahead = Point(0, 0, 49.5)
    in_camera = world_to_camera(cam) @ ahead
    projected = divide(camera_to_ndc(cam) @ in_camera)
    assert projected[:2] == pytest.approx([0.0, 0.0], abs=1e-9)
    assert -1 < projected[2] < 1


def test_equal_planes_rejected():
    cam = Camera()
    cam.far = cam.near
    with pytest.raises(ZeroDivisionError):
        camera_to_ndc(cam)