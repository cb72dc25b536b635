"""Scene state and input handling for the planet simulator."""

from __future__ import annotations

from typing import Optional

from planetsim.affine import Point, Vector
from planetsim.body import Body
from planetsim.camera import Camera
from planetsim.projection import camera_to_ndc, world_to_camera
from planetsim.sphere_mesh import SphereMesh
from planetsim.timing import FrameClock, WindowSettings

PI = 3.1415926535
TILT = -1 * 3.1415926 / 2
CAMERA_ROT_SPEED = 0.001
QUIT_KEY = "\x1b"

# Eye offsets in the camera frame (right, up, back); 'e' steps down twice.
_EYE_MOVES = {
    "w": (0, 0, -1),
    "s": (0, 0, 1),
    "a": (-1, 0, 0),
    "d": (1, 0, 0),
    "q": (0, 1, 0),
    "e": (0, -2, 0),
}

# default scale, default position, orbit rotation, self rotation
_PLANETS = (
    (1.0, (0, 0, -13), (0, 0.01, 0), (0.0, 0.03, 0.0)),
    (7.0, (0, 0, 0), (0, 0.0, 0), (0.0, 0.0, 0.0)),
    (2.3, (0, 0, -20), (0, 0.002, 0), (0.0, 0.01, 0.0)),
    (4.0, (0, 0, -27), (0, 0.001, 0), (0.0, 0.002, 0.0)),
)
_SPAWNED = (4.0, (0, 0, -27), (0, 0.001, 0), (0.0, 0.002, 0.0))


class Simulator:
    """Bodies, camera, clock and mouse state of a running simulation."""

    def __init__(self, window: Optional[WindowSettings] = None, texture_id: int = 0):
        self.window = window if window is not None else WindowSettings()
        self.texture_id = texture_id
        self.clock = FrameClock()
        self.sphere = SphereMesh()
        self.camera = Camera()
        self.relative_up = Vector(0, 1, 0)
        self.bodies: list[Body] = []
        self.mouse_pressed = False
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.mouse_x_old = 0.0
        self.mouse_y_old = 0.0
        self.mouse_initialized = False
        self.camera_rot_speed = CAMERA_ROT_SPEED

    def add_body(self, body: Body) -> None:
        self.bodies.append(body)

    def spawn_body(self, default_scale, default_position, rotation, self_rotation) -> Body:
        """Create a body with the shared texture and add it to the scene."""
        body = Body(len(self.bodies), self.texture_id)
        body.scale = Vector(1, 1, 1)
        body.default_scale = Vector(default_scale, default_scale, default_scale)
        body.default_rotation = Point(TILT, 0, 0)
        body.translation = Point(0, 0, 0)
        body.default_position = Point(*default_position)
        body.rotation = Point(*rotation)
        body.self_rotation = Point(*self_rotation)
        body.initialized = False
        self.add_body(body)
        return body

    def populate(self) -> None:
        """Reset the clock, place the camera and create the starting bodies."""
        self.clock = FrameClock()
        self.camera = Camera.looking(
            Point(0.0, 0.0, 50.0),
            Vector(0.0, 0.0, -1.0),
            self.relative_up,
            0.5 * PI,
            1,
            0.01,
            1.0,
        )
        for planet in _PLANETS:
            self.spawn_body(*planet)

    def key_pressed(self, key: str) -> None:
        """Handle a typed character; the escape character raises SystemExit."""
        if key == "j":
            self.spawn_body(*_SPAWNED)
        if key == QUIT_KEY:
            raise SystemExit(0)
        move = _EYE_MOVES.get(key)
        if move is not None:
            self.camera.change_eye(*move)

    def mouse_button(self, pressed: bool) -> None:
        """Record whether the left mouse button is down."""
        self.mouse_pressed = pressed

    def mouse_drag(self, x: float, y: float) -> None:
        if self.mouse_pressed:
            print(f"{x} ,{y}")

    def mouse_move(self, x: float, y: float) -> Optional[tuple[int, int]]:
        """Turn the camera by the mouse movement.

        The first call centres the pointer and returns the position it should
        be moved to; later calls return None.
        """
        if not self.mouse_initialized:
            centre = (self.window.width // 2, self.window.height // 2)
            self.mouse_x, self.mouse_y = map(float, centre)
            self.mouse_x_old, self.mouse_y_old = self.mouse_x, self.mouse_y
            self.mouse_initialized = True
            return centre
        self.mouse_x = float(x)
        self.mouse_y = float(y)
        self.camera.rotate_camera(
            self.camera_rot_speed * -1 * (self.mouse_y - self.mouse_y_old),
            self.camera_rot_speed * -1 * (self.mouse_x - self.mouse_x_old),
            0,
        )
        self.mouse_x_old = self.mouse_x
        self.mouse_y_old = self.mouse_y
        return None

    def resize(self, width: int, height: int) -> None:
        self.window.width = width
        self.window.height = height

    def advance(self, elapsed_ms: float) -> Optional[str]:
        """Step the clock; return a new window title when the frame rate is due."""
        fps = self.clock.tick(elapsed_ms)
        return None if fps is None else self.window.title(fps)

    def frame_vertices(self) -> list[tuple[int, list]]:
        """Advance every body one frame and return (texture id, vertices) per body."""
        camera_matrix = world_to_camera(self.camera)
        projection_matrix = camera_to_ndc(self.camera)
        frame = []
        for body in self.bodies:
            vertices = body.draw_vertices(
                camera_matrix, projection_matrix, self.sphere, body.initialized
            )
            body.initialized = True
            frame.append((body.texture_id, vertices))
        return frame