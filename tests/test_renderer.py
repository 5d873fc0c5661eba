import pytest

from spritekit.renderer import Renderer


def test_buffers_use_capacity():
    renderer = Renderer(8)
    assert renderer.static_sprites.capacity == 8
    assert renderer.anim_sprites.capacity == 8
    assert len(renderer.static_sprites) == 0


def test_batches_wrap_renderer_buffers():
    renderer = Renderer(4)
    assert renderer.batch.anim.buffer is renderer.anim_sprites
    assert renderer.batch.static.buffer is renderer.static_sprites


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Renderer(0)


def test_begin_end_cycle():
    renderer = Renderer(4)
    renderer.begin()
    assert renderer.in_frame
    renderer.end()
    assert not renderer.in_frame


def test_begin_twice_raises():
    renderer = Renderer(4)
    renderer.begin()
    with pytest.raises(RuntimeError):
        renderer.begin()


def test_end_without_begin_raises():
    with pytest.raises(RuntimeError):
        Renderer(4).end()


def test_shutdown_closes_frame():
    renderer = Renderer(4)
    renderer.begin()
    renderer.shutdown()
    assert renderer.in_frame is False


def test_draw_triangle_before_init_raises():
    with pytest.raises(RuntimeError):
        Renderer(4).draw_test_triangle(object())