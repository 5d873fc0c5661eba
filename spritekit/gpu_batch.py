"""Instanced sprite batches: packing sprite attributes and uploading them to the GPU."""

from __future__ import annotations

import struct

from spritekit.sprites import SpriteInstance, StaticSpriteBuffer

VBO_POSITION = 0
VBO_SCALE = 1
VBO_ROTATION = 2
VBO_UV_TEX = 3
VBO_BIT_FIELD = 4

ATTRIBUTE_SLOTS = (VBO_POSITION, VBO_SCALE, VBO_ROTATION, VBO_UV_TEX, VBO_BIT_FIELD)

_FORMATS = {
    VBO_POSITION: "=2f",
    VBO_SCALE: "=2f",
    VBO_ROTATION: "=f",
    VBO_UV_TEX: "=2H",
    VBO_BIT_FIELD: "=I",
}
_STRIDES = {slot: struct.calcsize(fmt) for slot, fmt in _FORMATS.items()}

# slot -> (shader location, component count, read as integer)
_LAYOUT = {
    VBO_POSITION: (2, 2, False),
    VBO_SCALE: (3, 2, False),
    VBO_ROTATION: (4, 1, False),
    VBO_UV_TEX: (5, 1, True),
    VBO_BIT_FIELD: (6, 1, True),
}

_QUAD_VERTICES = (
    -0.5, -0.5, 0.0, 0.0,
    0.5, -0.5, 1.0, 0.0,
    0.5, 0.5, 1.0, 1.0,
    -0.5, 0.5, 0.0, 1.0,
)
_QUAD_INDICES = (0, 1, 2, 2, 3, 0)

_FLOAT_SIZE = struct.calcsize("=f")
_UINT_SIZE = struct.calcsize("=I")


def _gl():
    from pyglet import gl

    return gl


def _pack_instance(instance: SpriteInstance) -> dict[int, bytes]:
    return {
        VBO_POSITION: struct.pack(_FORMATS[VBO_POSITION], *instance.position),
        VBO_SCALE: struct.pack(_FORMATS[VBO_SCALE], *instance.scale),
        VBO_ROTATION: struct.pack(_FORMATS[VBO_ROTATION], instance.rotation),
        VBO_UV_TEX: struct.pack(
            _FORMATS[VBO_UV_TEX], instance.uv_index & 0xFFFF, instance.tex_index & 0xFFFF
        ),
        VBO_BIT_FIELD: struct.pack(_FORMATS[VBO_BIT_FIELD], 1 if instance.flip else 0),
    }


def pack_attributes(buffer: StaticSpriteBuffer) -> dict[int, bytes]:
    """Pack every live sprite, in dense order, into one byte string per attribute slot."""
    chunks: dict[int, list[bytes]] = {slot: [] for slot in ATTRIBUTE_SLOTS}
    for instance in buffer:
        for slot, data in _pack_instance(instance).items():
            chunks[slot].append(data)
    return {slot: b"".join(parts) for slot, parts in chunks.items()}


class SpriteBatch:
    """GPU-side storage and instanced drawing for one sprite buffer."""

    def __init__(self, buffer: StaticSpriteBuffer):
        self.buffer = buffer
        self._vao: int | None = None
        self._quad_vbo = 0
        self._ibo = 0
        self._vbos: dict[int, int] = {}

    def _ensure_created(self) -> None:
        if self._vao is not None:
            return
        gl = _gl()
        vao = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao.value)

        quad = gl.GLuint()
        gl.glGenBuffers(1, quad)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, quad.value)
        vertices = (gl.GLfloat * len(_QUAD_VERTICES))(*_QUAD_VERTICES)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, len(_QUAD_VERTICES) * _FLOAT_SIZE, vertices, gl.GL_STATIC_DRAW
        )
        vertex_stride = 4 * _FLOAT_SIZE
        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, vertex_stride, 0)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, vertex_stride, 2 * _FLOAT_SIZE)
        gl.glEnableVertexAttribArray(1)

        ibo = gl.GLuint()
        gl.glGenBuffers(1, ibo)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ibo.value)
        indices = (gl.GLuint * len(_QUAD_INDICES))(*_QUAD_INDICES)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, len(_QUAD_INDICES) * _UINT_SIZE, indices, gl.GL_STATIC_DRAW
        )

        ids = (gl.GLuint * len(ATTRIBUTE_SLOTS))()
        gl.glGenBuffers(len(ATTRIBUTE_SLOTS), ids)
        capacity = self.buffer.capacity
        for slot, (location, components, integer) in _LAYOUT.items():
            stride = _STRIDES[slot]
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, ids[slot])
            gl.glBufferData(gl.GL_ARRAY_BUFFER, capacity * stride, None, gl.GL_DYNAMIC_DRAW)
            if integer:
                gl.glVertexAttribIPointer(location, components, gl.GL_UNSIGNED_INT, stride, 0)
            else:
                gl.glVertexAttribPointer(
                    location, components, gl.GL_FLOAT, gl.GL_FALSE, stride, 0
                )
            gl.glEnableVertexAttribArray(location)
            gl.glVertexAttribDivisor(location, 1)
            self._vbos[slot] = ids[slot]

        gl.glBindVertexArray(0)
        self._vao = vao.value
        self._quad_vbo = quad.value
        self._ibo = ibo.value

    def _upload(self, slot: int, offset: int, data: bytes) -> None:
        if not data:
            return
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbos[slot])
        raw = (gl.GLubyte * len(data)).from_buffer_copy(data)
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, offset, len(data), raw)

    def flush(self) -> None:
        """Upload every live sprite's attributes."""
        self._ensure_created()
        for slot, data in pack_attributes(self.buffer).items():
            self._upload(slot, 0, data)
        _gl().glBindBuffer(_gl().GL_ARRAY_BUFFER, 0)

    def push(self, handle: int) -> None:
        """Upload the attributes of one sprite at its dense index."""
        index = self.buffer.index_of(handle)
        instance = self.buffer.instance(handle)
        self._ensure_created()
        for slot, data in _pack_instance(instance).items():
            self._upload(slot, index * _STRIDES[slot], data)
        _gl().glBindBuffer(_gl().GL_ARRAY_BUFFER, 0)

    def draw(self) -> None:
        """Draw every live sprite as an instanced quad."""
        self._ensure_created()
        gl = _gl()
        gl.glBindVertexArray(self._vao)
        gl.glDrawElementsInstanced(
            gl.GL_TRIANGLES, len(_QUAD_INDICES), gl.GL_UNSIGNED_INT, None, len(self.buffer)
        )
        gl.glBindVertexArray(0)


class BatchRenderer:
    """A static and an animated sprite batch handled together."""

    def __init__(self, static_buffer: StaticSpriteBuffer, anim_buffer: StaticSpriteBuffer):
        self.static = SpriteBatch(static_buffer)
        self.anim = SpriteBatch(anim_buffer)

    def flush(self) -> None:
        self.static.flush()
        self.anim.flush()

    def draw(self) -> None:
        self.anim.draw()
        self.static.draw()