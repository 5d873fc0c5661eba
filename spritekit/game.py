"""The demo game: a grid of animated sprites moved with W/A/S/D."""

from __future__ import annotations

import math
import sys
from typing import Callable, TextIO

from spritekit.atlas import TextureAtlas
from spritekit.shader import Shader

VERTEX_SHADER_PATH = "./assets/shader/sprite.vert"
FRAGMENT_SHADER_PATH = "./assets/shader/sprite.frag"
SPRITESHEET_PATH = "./assets/sprites/debug.png"
TILE_SIZE = 32
MOVE_SPEED = 5.0
_STEP = 0.001 * MOVE_SPEED

KEY_W = ord("w")
KEY_A = ord("a")
KEY_S = ord("s")
KEY_D = ord("d")

IDENTITY = tuple(1.0 if row == col else 0.0 for col in range(4) for row in range(4))


def _translation(x: float, y: float, z: float) -> tuple[float, ...]:
    matrix = list(IDENTITY)
    matrix[12:15] = [x, y, z]
    return tuple(matrix)


def initial_layout(count: int) -> list[tuple[float, float]]:
    """Starting positions for the demo sprites."""
    return [
        (math.fmod(0.1 * i, 2.0), math.fmod(math.floor(0.1 * i) / 200.0, 2.0))
        for i in range(count)
    ]


def movement_delta(up: bool, down: bool, left: bool, right: bool) -> tuple[float, float]:
    """Per-frame camera movement for the pressed direction keys."""
    dx = (_STEP if right else 0.0) - (_STEP if left else 0.0)
    dy = (_STEP if up else 0.0) - (_STEP if down else 0.0)
    return dx, dy


class FpsReporter:
    """Writes a frame-rate line about once a second."""

    def __init__(self, time_source: Callable[[], float], output: TextIO | None = None):
        self._time_source = time_source
        self._output = output
        self._last_time = 0.0
        self._frame_count = 0

    def frame(self, fps: int, anim_count: int, static_count: int) -> str | None:
        """Count a frame; return and write the report line when one is due."""
        now = self._time_source()
        self._frame_count += 1
        if now - self._last_time < 1.0:
            return None
        line = (
            f"FPS: {fps:<10d} TPS: {self._frame_count:<10d} "
            f"EA-count: {anim_count:<10d} ES-count: {static_count:<10d}\n"
        )
        (self._output or sys.stdout).write(line)
        self._frame_count = 0
        self._last_time = now
        return line


class Game:
    def __init__(self, platform, clock, renderer):
        self.platform = platform
        self.clock = clock
        self.renderer = renderer
        self.position = (0.0, 0.0, 0.0)
        self.model = IDENTITY
        self.shader: Shader | None = None
        self.atlas: TextureAtlas | None = None
        self.fps_reporter = FpsReporter(clock.raw_time)

    def init(self) -> None:
        """Load assets and spawn the demo sprites."""
        from pyglet import gl

        gl.glClearColor(0.2, 0.3, 0.3, 1.0)
        self.platform.set_vsync(0)
        self.shader = Shader.from_files(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)
        self.atlas = TextureAtlas.create(SPRITESHEET_PATH, TILE_SIZE, TILE_SIZE)
        print(
            f"atlas: aw{self.atlas.atlas_width:.1f}, ah{self.atlas.atlas_height:.1f}, "
            f"tw{TILE_SIZE}, th{TILE_SIZE} "
        )

        sprites = self.renderer.anim_sprites
        for position in initial_layout(sprites.capacity - 1):
            instance = sprites.instance(sprites.create())
            instance.scale = (0.1, 0.1)
            instance.position = position
        self.renderer.batch.anim.flush()

    def update(self, delta_time: float) -> None:
        pressed = self.platform.is_key_pressed
        dx, dy = movement_delta(pressed(KEY_W), pressed(KEY_S), pressed(KEY_A), pressed(KEY_D))
        if dx or dy:
            x, y, z = self.position
            self.position = (x + dx, y + dy, z)
            self.model = _translation(*self.position)
        self.fps_reporter.frame(
            self.clock.fps, len(self.renderer.anim_sprites), len(self.renderer.static_sprites)
        )

    def render(self) -> None:
        if self.shader is None or self.atlas is None:
            raise RuntimeError("game not initialised")
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        self.shader.bind()
        self.atlas.bind(self.shader, 0)
        self.shader.set_uniform_mat4("u_projection", IDENTITY)
        self.shader.set_uniform_mat4("u_model", self.model)
        self.renderer.batch.anim.draw()

    def shutdown(self) -> None:
        """Release the loaded assets."""
        if self.atlas is not None:
            self.atlas.destroy()
            self.atlas = None
        if self.shader is not None:
            self.shader.destroy()
            self.shader = None