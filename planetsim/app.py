"""Windowed entry point of the planet simulator."""

from __future__ import annotations

import argparse
import math
import time

from planetsim.simulator import Simulator
from planetsim.texture import DEFAULT_FILES, TextureSet
from planetsim.timing import WindowSettings

_DEFAULTS = WindowSettings()


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command-line options."""
    parser = argparse.ArgumentParser(prog="planetsim", description=_DEFAULTS.name)
    parser.add_argument("--width", type=_positive_int, default=_DEFAULTS.width)
    parser.add_argument("--height", type=_positive_int, default=_DEFAULTS.height)
    parser.add_argument("--texture", default=DEFAULT_FILES[0], help="raw RGB texture file")
    return parser.parse_args(argv)


def _perspective(fovy: float, aspect: float, near: float, far: float) -> tuple:
    """Column-major perspective matrix for a vertical field of view in degrees."""
    f = 1 / math.tan(math.radians(fovy) / 2)
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / (near - far), -1.0,
        0.0, 0.0, 2 * far * near / (near - far), 0.0,
    )


def main(argv=None) -> int:
    args = parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.window import key, mouse

    settings = WindowSettings(width=args.width, height=args.height)
    config = gl.Config(double_buffer=True, depth_size=24)
    window = pyglet.window.Window(
        width=settings.width,
        height=settings.height,
        caption=settings.name,
        resizable=True,
        config=config,
    )
    window.set_location(0, 0)

    uploaded = []

    def upload(data: bytes, width: int, height: int) -> int:
        image = pyglet.image.ImageData(width, height, "RGB", data, pitch=width * 3)
        texture = image.get_mipmapped_texture()
        uploaded.append(texture)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)
        gl.glTexEnvf(gl.GL_TEXTURE_ENV, gl.GL_TEXTURE_ENV_MODE, gl.GL_MODULATE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        return texture.id

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_TEXTURE_2D)
    gl.glDepthFunc(gl.GL_LEQUAL)
    gl.glCullFace(gl.GL_BACK)
    gl.glFrontFace(gl.GL_CCW)
    gl.glEnable(gl.GL_CULL_FACE)

    textures = TextureSet([args.texture], upload)
    sim = Simulator(settings, textures[0])
    sim.populate()
    start = time.monotonic()

    def quit_app():
        window.close()
        pyglet.app.exit()

    @window.event
    def on_resize(width, height):
        sim.resize(width, height)
        fb_width, fb_height = window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        gl.glMatrixMode(gl.GL_PROJECTION)
        matrix = _perspective(60, width / max(height, 1), 0.1, 100.0)
        gl.glLoadMatrixf((gl.GLfloat * 16)(*matrix))
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_draw():
        title = sim.advance((time.monotonic() - start) * 1000)
        if title is not None:
            window.set_caption(title)
        gl.glClearColor(0, 0, 0, 0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        gl.glClearDepth(1)
        gl.glClear(gl.GL_DEPTH_BUFFER_BIT)
        for texture_id, vertices in sim.frame_vertices():
            gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)
            gl.glBegin(gl.GL_TRIANGLE_STRIP)
            for (u, v), (x, y, z) in vertices:
                gl.glTexCoord2f(u, v)
                gl.glVertex3f(x, y, z)
            gl.glEnd()

    @window.event
    def on_text(text):
        try:
            for character in text:
                sim.key_pressed(character)
        except SystemExit:
            quit_app()

    @window.event
    def on_key_press(symbol, modifiers):
        if symbol == key.ESCAPE:
            try:
                sim.key_pressed("\x1b")
            except SystemExit:
                quit_app()
            return pyglet.event.EVENT_HANDLED
        return None

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        if button == mouse.LEFT:
            sim.mouse_button(True)

    @window.event
    def on_mouse_release(x, y, button, modifiers):
        if button == mouse.LEFT:
            sim.mouse_button(False)

    @window.event
    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
        sim.mouse_drag(x, window.height - y)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        warp = sim.mouse_move(x, window.height - y)
        if warp is not None:
            window.set_mouse_position(warp[0], window.height - warp[1])

    pyglet.clock.schedule(lambda dt: None)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())