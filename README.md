# planetsim

A small planet simulator. It opens a window and draws a set of textured
spheres that spin about their own axes and orbit the world origin, seen
through a free-look camera steered with the keyboard and mouse.

Underneath sits a compact 3D math toolkit that can be used on its own:
homogeneous points and vectors, 4×4 matrices, affine transforms
(rotation, translation, scaling, inverse), a camera model and a perspective
projection.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the simulator

```
planetsim
```

Options:

| Option       | Default        | Meaning                              |
|--------------|----------------|--------------------------------------|
| `--width`    | `1600`         | window width in pixels (positive)    |
| `--height`   | `800`          | window height in pixels (positive)   |
| `--texture`  | `texture.raw`  | raw RGB texture file                 |

The texture is headerless 24-bit RGB, 1024 × 512 pixels. A shorter file is
padded with zero bytes. If the file cannot be opened, the bodies are drawn
with texture id 0, that is, untextured.

The window title shows the frame rate, updated about twice a second.

### Controls

| Input            | Action                                                |
|------------------|-------------------------------------------------------|
| `w` / `s`        | move the eye forward / back along the view direction  |
| `a` / `d`        | move the eye left / right                             |
| `q`              | move the eye up one unit                              |
| `e`              | move the eye down two units                           |
| `j`              | add another planet                                    |
| mouse move       | turn the camera                                       |
| left-button drag | print the pointer position to standard output         |
| `Esc`            | quit                                                  |

## Using the math library

```python
import math
from planetsim.affine import Point, Vector, rot, trans, scale, inverse

p = Point(1, 0, 0)
m = trans(Vector(0, 0, -5)) @ rot(math.pi / 2, Vector(0, 0, 1)) @ scale(2, 2, 2)
moved = m @ p                 # homogeneous coordinates of the moved point
back = inverse(m) @ moved     # close to the original point
```

`scale` takes either one factor (uniform) or three. `rot`, `inverse` and
`Vector.normalize` raise `ValueError` for a zero axis, a singular matrix or a
zero vector; `as_point`, `as_vector` and `Affine.from_matrix` raise
`ValueError` when the homogeneous `w` or the last matrix row is wrong.

Cameras and projections:

```python
import math
from planetsim.affine import Point, Vector
from planetsim.camera import Camera
from planetsim.projection import camera_to_ndc

cam = Camera.looking(Point(0, 0, 50), Vector(0, 0, -1), Vector(0, 1, 0),
                     math.pi / 2, 1.0, 0.01, 1.0)
view = cam.world_to_camera()
proj = camera_to_ndc(cam)
cam.yaw(0.1).pitch(0.05).zoom(0.9)
```

## Other modules

- `planetsim.sphere_mesh.SphereMesh`: the unit-sphere triangle strip,
  2592 vertices in 10-degree patches, with `vertex(i)` and `uv(i)`.
- `planetsim.body.Body`: one body's default placement, orbit rotation and
  spin; `draw_vertices` advances it one frame and returns the visible
  vertices in device space.
- `planetsim.timing`: `FrameClock` (frame deltas and frame-rate reports) and
  `WindowSettings` (window name and size).
- `planetsim.texture`: `read_raw_texture` and `TextureSet`, which hands each
  loaded image to an upload callback.
- `planetsim.simulator.Simulator`: the scene, camera, clock and input
  handling, with no window attached; `frame_vertices()` gives what to draw.

## What it does not do

- There is no physics: bodies turn by a fixed angle every frame, so orbit
  and spin speeds follow the frame rate, not wall-clock time.
- There is no lighting or shading; bodies are drawn only with their texture.
- Every body is a sphere; no other models can be loaded. `Face` and `Edge`
  exist in `planetsim.sphere_mesh`, but the sphere provides no face or edge
  lists.
- The window draws with the fixed-function OpenGL pipeline, so it needs an
  OpenGL driver that still offers it.