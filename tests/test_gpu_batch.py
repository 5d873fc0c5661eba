import struct

import pytest

from spritekit.gpu_batch import (
    ATTRIBUTE_SLOTS,
    VBO_BIT_FIELD,
    VBO_POSITION,
    VBO_ROTATION,
    VBO_SCALE,
    VBO_UV_TEX,
    BatchRenderer,
    SpriteBatch,
    pack_attributes,
)
from spritekit.sprites import AnimatedSpriteBuffer, StaticSpriteBuffer


def test_empty_buffer_packs_to_empty_bytes():
    packed = pack_attributes(StaticSpriteBuffer(4))
    assert set(packed) == set(ATTRIBUTE_SLOTS)
    assert all(data == b"" for data in packed.values())


def test_single_sprite_round_trip():
    buf = StaticSpriteBuffer(4)
    handle = buf.create()
    inst = buf.instance(handle)
    inst.position = (1.5, -2.0)
    inst.scale = (0.25, 0.5)
    inst.rotation = 0.75
    inst.uv_index = 7
    inst.tex_index = 3
    inst.flip = True
    packed = pack_attributes(buf)
    assert struct.unpack("=2f", packed[VBO_POSITION]) == (1.5, -2.0)
    assert struct.unpack("=2f", packed[VBO_SCALE]) == (0.25, 0.5)
    assert struct.unpack("=f", packed[VBO_ROTATION]) == (0.75,)
    assert struct.unpack("=2H", packed[VBO_UV_TEX]) == (7, 3)
    assert struct.unpack("=I", packed[VBO_BIT_FIELD]) == (1,)


def test_sizes_scale_with_count():
    buf = AnimatedSpriteBuffer(8)
    for _ in range(3):
        buf.create()
    packed = pack_attributes(buf)
    assert len(packed[VBO_POSITION]) == 3 * struct.calcsize("=2f")
    assert len(packed[VBO_ROTATION]) == 3 * struct.calcsize("=f")
    assert len(packed[VBO_BIT_FIELD]) == 3 * struct.calcsize("=I")


def test_packing_follows_dense_order_after_remove():
    buf = StaticSpriteBuffer(4)
    handles = [buf.create() for _ in range(3)]
    for x, handle in zip((1.0, 2.0, 3.0), handles):
        buf.instance(handle).position = (x, 0.0)
    buf.remove(handles[0])
    packed = pack_attributes(buf)
    xs = [x for x, _ in struct.iter_unpack("=2f", packed[VBO_POSITION])]
    assert xs == [3.0, 2.0]


def test_push_unknown_handle_raises():
    batch = SpriteBatch(StaticSpriteBuffer(4))
    with pytest.raises(KeyError):
        batch.push(2)


def test_batch_renderer_wraps_buffers():
    static = StaticSpriteBuffer(4)
    anim = AnimatedSpriteBuffer(4)
    batches = BatchRenderer(static, anim)
    assert batches.static.buffer is static
    assert batches.anim.buffer is anim