"""2D texture loading through Pillow and OpenGL."""

from __future__ import annotations

import os

from PIL import Image


def load_image(path: str | os.PathLike) -> tuple[int, int, bytes]:
    """Load an image as bottom-up RGBA pixels: (width, height, data)."""
    with Image.open(path) as img:
        rgba = img.convert("RGBA").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return rgba.width, rgba.height, rgba.tobytes()


class Texture:
    """An OpenGL 2D texture with nearest filtering and edge clamping."""

    def __init__(self, texture_id: int, width: int, height: int):
        self.id = texture_id
        self.width = width
        self.height = height

    @classmethod
    def load(cls, path) -> "Texture":
        from pyglet import gl

        width, height, data = load_image(path)
        tex_id = gl.GLuint()
        gl.glGenTextures(1, tex_id)
        gl.glBindTexture(gl.GL_TEXTURE_2D, tex_id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, width, height, 0,
            gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, data,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        return cls(tex_id.value, width, height)

    def bind(self, slot: int) -> None:
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)

    def free(self) -> None:
        from pyglet import gl

        gl.glDeleteTextures(1, gl.GLuint(self.id))
        self.id = 0