"""Renderer front end: global GL state, sprite buffers and a debug triangle."""

from __future__ import annotations

import struct

from spritekit.gpu_batch import BatchRenderer
from spritekit.sprites import DEFAULT_CAPACITY, AnimatedSpriteBuffer, StaticSpriteBuffer

_TRIANGLE_VERTICES = (
    0.0, 0.5, 0.0, 1.0, 0.0, 0.0,
    -0.5, -0.5, 0.0, 0.0, 1.0, 0.0,
    0.5, -0.5, 0.0, 0.0, 0.0, 1.0,
)

_FLOAT_SIZE = struct.calcsize("=f")


def _gl():
    from pyglet import gl

    return gl


class Renderer:
    """Owns the sprite buffers and their GPU batches."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.static_sprites = StaticSpriteBuffer(capacity)
        self.anim_sprites = AnimatedSpriteBuffer(capacity)
        self.batch = BatchRenderer(self.static_sprites, self.anim_sprites)
        self.in_frame = False
        self._triangle: tuple[int, int] | None = None

    def init(self) -> None:
        """Enable alpha blending and create the GPU batches."""
        gl = _gl()
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        self.batch.flush()

    def shutdown(self) -> None:
        """End any open frame and release the debug triangle."""
        self.in_frame = False
        if self._triangle is not None:
            gl = _gl()
            vao, vbo = self._triangle
            gl.glDeleteBuffers(1, gl.GLuint(vbo))
            gl.glDeleteVertexArrays(1, gl.GLuint(vao))
            self._triangle = None

    def begin(self) -> None:
        """Mark the start of a frame."""
        if self.in_frame:
            raise RuntimeError("frame already begun")
        self.in_frame = True

    def end(self) -> None:
        """Mark the end of a frame."""
        if not self.in_frame:
            raise RuntimeError("no frame to end")
        self.in_frame = False

    def init_test_triangle(self) -> int:
        """Create a coloured triangle for debugging and return its vertex array id."""
        gl = _gl()
        vao = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao.value)
        vbo = gl.GLuint()
        gl.glGenBuffers(1, vbo)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo.value)
        data = (gl.GLfloat * len(_TRIANGLE_VERTICES))(*_TRIANGLE_VERTICES)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, len(_TRIANGLE_VERTICES) * _FLOAT_SIZE, data, gl.GL_STATIC_DRAW
        )
        stride = 6 * _FLOAT_SIZE
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glEnableVertexAttribArray(1)
        gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * _FLOAT_SIZE)
        gl.glBindVertexArray(0)
        self._triangle = (vao.value, vbo.value)
        return vao.value

    def draw_test_triangle(self, shader) -> None:
        if self._triangle is None:
            raise RuntimeError("test triangle not initialised")
        gl = _gl()
        shader.bind()
        gl.glBindVertexArray(self._triangle[0])
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, 3)