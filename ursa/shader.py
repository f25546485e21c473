"""GLSL shader program built from a vertex and a fragment source file."""

from __future__ import annotations

from pathlib import Path

from ursa.log import get_logger

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class ShaderError(RuntimeError):
    """Raised when a shader stage fails to compile or the program fails to link."""


def read_shader_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Read both shader files; on any read failure log it and return two empty sources."""
    try:
        vertex = Path(vertex_path).read_text(encoding=_ENCODING, errors=_ERRORS)
        fragment = Path(fragment_path).read_text(encoding=_ENCODING, errors=_ERRORS)
    except OSError:
        get_logger().error("Shader not successfully read!")
        return "", ""
    return vertex, fragment


def format_compile_error(path, error_log: str) -> str:
    """Build the message logged when a shader fails to compile."""
    absolute = Path(path).absolute().as_posix()
    return (
        f"[OpenGL] Failed to compile shader '{absolute}'\n"
        "-- -------------^------------------------------------- -- \n\n\n"
        f"{error_log}                                                        \n"
        "-- --------------------------------------------------- -- "
    )


def format_link_error(error_log: str) -> str:
    """Build the message logged when a shader program fails to link."""
    return (
        "[OpenGL] Failed to link shader!\n"
        "-- -------------^------------------------------------- -- \n\n\n"
        f"{error_log}                                                        \n\n"
        "-- --------------------------------------------------- -- "
    )


def _c_string(gl, text: str):
    data = text.encode(_ENCODING) + b"\0"
    return (gl.GLchar * len(data)).from_buffer_copy(data)


class Shader:
    """A linked GL program; requires a current OpenGL context.

    Compile and link failures are logged and then raised as ``ShaderError``.
    """

    def __init__(self, vertex_path, fragment_path):
        from pyglet import gl
        from pyglet.graphics import shader as glsl

        self._gl = gl
        vertex_source, fragment_source = read_shader_sources(vertex_path, fragment_path)

        stages = []
        failed = False
        for source, kind, path in (
            (vertex_source, "vertex", vertex_path),
            (fragment_source, "fragment", fragment_path),
        ):
            try:
                stages.append(glsl.Shader(source, kind))
            except glsl.ShaderException as error:
                get_logger().error("%s", format_compile_error(path, str(error)))
                failed = True
        if failed:
            raise ShaderError("shader compilation failed")

        try:
            self._program = glsl.ShaderProgram(*stages)
        except glsl.ShaderException as error:
            get_logger().error("%s", format_link_error(str(error)))
            raise ShaderError("shader program failed to link") from error

        self.id = self._program.id

    def _location(self, name: str) -> int:
        return self._gl.glGetUniformLocation(self.id, _c_string(self._gl, name))

    def use(self) -> None:
        """Make this program current."""
        self._gl.glUseProgram(self.id)

    def unuse(self) -> None:
        """Clear the current program."""
        self._gl.glUseProgram(0)

    def set_bool(self, name: str, value: bool) -> None:
        self._gl.glUniform1i(self._location(name), int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._gl.glUniform1i(self._location(name), int(value))

    def set_float(self, name: str, value: float) -> None:
        self._gl.glUniform1f(self._location(name), float(value))