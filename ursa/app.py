"""Window that renders a rotating, textured quad."""

from __future__ import annotations

import argparse
import math
import time
from pathlib import Path

from PIL import Image

from ursa import log
from ursa.shader import Shader, ShaderError

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Ursa Engine!"
FRAME_INTERVAL = 1.0 / 60.0

# GLfloat is 32 bits wide by definition.
_FLOAT_SIZE = 4

# positions (3), colours (3), texture coordinates (2)
VERTICES = (
    -0.6, 0.6, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0,
    -0.6, -0.6, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0,
    0.6, 0.6, 0.0, 1.0, 1.0, 0.0, 1.0, 1.0,
    0.6, -0.6, 0.0, 0.0, 1.0, 1.0, 1.0, 0.0,
)
INDICES = (0, 1, 3, 3, 2, 0)

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


def load_image(path, channels: int) -> tuple[int, int, bytes]:
    """Load an image as tightly packed pixels, bottom row first.

    Returns ``(width, height, data)``. Raises ``OSError`` if the file cannot be
    read or decoded and ``ValueError`` for an unsupported channel count.
    """
    mode = _MODES.get(channels)
    if mode is None:
        raise ValueError(f"unsupported channel count: {channels}")
    with Image.open(path) as image:
        converted = image.convert(mode).transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return converted.width, converted.height, converted.tobytes()


def rotation_z(angle: float) -> tuple[float, ...]:
    """Column-major 4x4 matrix rotating by ``angle`` radians about the z axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def _c_string(gl, text: str):
    data = text.encode("utf-8") + b"\0"
    return (gl.GLchar * len(data)).from_buffer_copy(data)


def _upload_texture(gl, texture, image, internal_format, pixel_format) -> None:
    width, height, data = image
    gl.glBindTexture(gl.GL_TEXTURE_2D, texture)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
    pixels = (gl.GLubyte * len(data)).from_buffer_copy(data) if data else None
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D, 0, internal_format, width, height, 0,
        pixel_format, gl.GL_UNSIGNED_BYTE, pixels,
    )
    gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
    gl.glBindTexture(gl.GL_TEXTURE_2D, 0)


def _create_quad(gl):
    vao = (gl.GLuint * 1)()
    vbo = (gl.GLuint * 1)()
    ebo = (gl.GLuint * 1)()
    gl.glGenVertexArrays(1, vao)
    gl.glGenBuffers(1, vbo)
    gl.glGenBuffers(1, ebo)

    gl.glBindVertexArray(vao[0])
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo[0])
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo[0])

    stride = 8 * _FLOAT_SIZE
    for index, (size, offset) in enumerate(((3, 0), (3, 3), (2, 6))):
        gl.glEnableVertexAttribArray(index)
        gl.glVertexAttribPointer(
            index, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * _FLOAT_SIZE
        )

    vertices = (gl.GLfloat * len(VERTICES))(*VERTICES)
    indices = (gl.GLuint * len(INDICES))(*INDICES)
    gl.glBufferData(
        gl.GL_ARRAY_BUFFER, memoryview(vertices).nbytes, vertices, gl.GL_STATIC_DRAW
    )
    gl.glBufferData(
        gl.GL_ELEMENT_ARRAY_BUFFER, memoryview(indices).nbytes, indices, gl.GL_STATIC_DRAW
    )

    gl.glBindVertexArray(0)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)
    return vao[0]


def _load_textures(resources: Path):
    logger = log.get_logger()
    images = []
    failed = False
    for name, channels in (("Container.jpg", 3), ("Tag.png", 4)):
        try:
            images.append(load_image(resources / "images" / name, channels))
        except OSError:
            failed = True
            images.append((0, 0, b""))
    if failed:
        logger.error("Failed to load texture from image!")
    return images


def _run(pyglet, gl, window, resources: Path) -> int:
    images = _load_textures(resources)
    vao = _create_quad(gl)

    textures = (gl.GLuint * 2)()
    gl.glGenTextures(2, textures)
    _upload_texture(gl, textures[0], images[0], gl.GL_RGB8, gl.GL_RGB)
    _upload_texture(gl, textures[1], images[1], gl.GL_RGBA8, gl.GL_RGBA)

    shader = Shader(
        resources / "shaders" / "VertexSample.vert",
        resources / "shaders" / "FragmentSample.frag",
    )
    shader.use()
    shader.set_int("tex0", 0)
    shader.set_int("tex1", 1)
    shader.unuse()

    gl.glClearColor(0.1, 0.1, 0.3, 1.0)
    gl.glClearDepth(1.0)

    start = time.perf_counter()
    exit_code = 0
    transform_name = _c_string(gl, "transform")

    @window.event
    def on_draw():
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        matrix = (gl.GLfloat * 16)(*rotation_z(time.perf_counter() - start))
        location = gl.glGetUniformLocation(shader.id, transform_name)

        shader.use()
        gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, matrix)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, textures[0])
        gl.glActiveTexture(gl.GL_TEXTURE1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, textures[1])
        gl.glBindVertexArray(vao)
        gl.glDrawElements(gl.GL_TRIANGLES, len(INDICES), gl.GL_UNSIGNED_INT, None)
        gl.glBindVertexArray(0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
        shader.unuse()
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_resize(width, height):
        frame_width, frame_height = window.get_framebuffer_size()
        gl.glViewport(0, 0, frame_width, frame_height)
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_key_press(symbol, modifiers):
        nonlocal exit_code
        if symbol == pyglet.window.key.ESCAPE:
            exit_code = -1
            window.close()
            pyglet.app.exit()
            return pyglet.event.EVENT_HANDLED
        return None

    pyglet.app.run(FRAME_INTERVAL)
    return exit_code


def main(argv=None) -> int:
    """Open the window and render until it is closed; returns the exit status."""
    parser = argparse.ArgumentParser(prog="ursa", description="Render a rotating textured quad.")
    parser.add_argument(
        "resources",
        nargs="?",
        default="resource",
        help="directory holding the images/ and shaders/ folders (default: resource)",
    )
    args = parser.parse_args(argv)

    log.setup(log.TRACE)
    logger = log.get_logger()

    try:
        import pyglet
        from pyglet import gl

        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        window = pyglet.window.Window(
            WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, config=config
        )
    except Exception:  # no display, no GL library or no matching context
        logger.critical("Failed to create window!")
        return -1

    try:
        return _run(pyglet, gl, window, Path(args.resources))
    except ShaderError:
        window.close()
        return -1
    except gl.GLException as error:
        logger.error("[OpenGL] %s", error)
        window.close()
        return -1


if __name__ == "__main__":
    raise SystemExit(main())