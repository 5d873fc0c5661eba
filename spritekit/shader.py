"""GLSL shader program loading and uniform setting."""

from __future__ import annotations

import os
from typing import Iterable, Sequence


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile or link."""


def read_text_file(path: str | os.PathLike) -> str:
    """Read a whole text file."""
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _gl():
    from pyglet import gl

    return gl


def unbind_shader() -> None:
    """Make no program active."""
    _gl().glUseProgram(0)


def _flatten(value: Iterable) -> list[float]:
    out: list[float] = []
    for item in value:
        if isinstance(item, (int, float)):
            out.append(float(item))
        else:
            out.extend(_flatten(item))
    return out


def _floats(value: Iterable, count: int):
    gl = _gl()
    flat = _flatten(value)
    if len(flat) != count:
        raise ValueError(f"expected {count} components, got {len(flat)}")
    return (gl.GLfloat * count)(*flat)


def _c_string(text: str):
    gl = _gl()
    data = text.encode("utf-8") + b"\0"
    return (gl.GLchar * len(data)).from_buffer_copy(data)


def _compile(source: str, kind: str):
    from pyglet.graphics.shader import Shader as _GLShader
    from pyglet.graphics.shader import ShaderException

    try:
        return _GLShader(source, kind)
    except ShaderException as exc:
        raise ShaderError(f"Shader compilation error: {exc}") from exc


def _link(vert, frag):
    from pyglet.graphics.shader import ShaderException, ShaderProgram

    try:
        return ShaderProgram(vert, frag)
    except ShaderException as exc:
        raise ShaderError(f"Shader linking error: {exc}") from exc
    finally:
        vert.delete()
        frag.delete()


class Shader:
    """A linked vertex + fragment program."""

    def __init__(self, program: int, owner=None):
        self.program = program
        self._owner = owner

    @classmethod
    def from_files(cls, vert_path, frag_path) -> "Shader":
        """Load, compile and link shaders from two source files."""
        return cls.from_source(read_text_file(vert_path), read_text_file(frag_path))

    @classmethod
    def from_source(cls, vertex_source: str, fragment_source: str) -> "Shader":
        """Compile and link a program from vertex and fragment source text."""
        vert = _compile(vertex_source, "vertex")
        try:
            frag = _compile(fragment_source, "fragment")
        except ShaderError:
            vert.delete()
            raise
        program = _link(vert, frag)
        return cls(program.id, program)

    def bind(self) -> None:
        _gl().glUseProgram(self.program)

    def destroy(self) -> None:
        if self._owner is not None:
            self._owner.delete()
            self._owner = None
        else:
            _gl().glDeleteProgram(self.program)
        self.program = 0

    def _location(self, name: str) -> int:
        return _gl().glGetUniformLocation(self.program, _c_string(name))

    def set_uniform_mat4(self, name: str, value: Sequence) -> None:
        gl = _gl()
        gl.glUniformMatrix4fv(self._location(name), 1, gl.GL_FALSE, _floats(value, 16))

    def set_uniform_vec2(self, name: str, value: Sequence[float]) -> None:
        _gl().glUniform2fv(self._location(name), 1, _floats(value, 2))

    def set_uniform_vec4(self, name: str, value: Sequence[float]) -> None:
        _gl().glUniform4fv(self._location(name), 1, _floats(value, 4))

    def set_uniform_float(self, name: str, value: float) -> None:
        _gl().glUniform1f(self._location(name), float(value))

    def set_uniform_int(self, name: str, value: int) -> None:
        _gl().glUniform1i(self._location(name), int(value))