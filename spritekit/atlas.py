"""Texture atlases split into fixed-size tiles."""

from __future__ import annotations

from dataclasses import dataclass

from spritekit.texture import Texture

MAX_SLOTS = 16


def count_tiles(atlas_width: int, atlas_height: int, tile_width: int, tile_height: int) -> int:
    """Number of whole tiles that fit in the atlas."""
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError("tile size must be positive")
    return (atlas_width // tile_width) * (atlas_height // tile_height)


def _check_slot(slot: int) -> None:
    if not 0 <= slot < MAX_SLOTS:
        raise ValueError(f"slot must be in 0..{MAX_SLOTS - 1}")


def atlas_uniform_name(slot: int) -> str:
    _check_slot(slot)
    return f"u_atlas_info[{slot}]"


def texture_uniform_name(slot: int) -> str:
    _check_slot(slot)
    return f"u_textures[{slot}]"


@dataclass
class TextureAtlas:
    atlas_width: float
    atlas_height: float
    tile_width: float
    tile_height: float
    tile_count: int
    texture: Texture

    @classmethod
    def create(cls, image_path, tile_width: int, tile_height: int) -> "TextureAtlas":
        texture = Texture.load(image_path)
        return cls(
            float(texture.width),
            float(texture.height),
            float(tile_width),
            float(tile_height),
            count_tiles(texture.width, texture.height, tile_width, tile_height),
            texture,
        )

    def info(self) -> tuple[float, float, float, float]:
        """The vec4 uploaded to the shader: atlas size then tile size."""
        return (self.atlas_width, self.atlas_height, self.tile_width, self.tile_height)

    def bind(self, shader, slot: int) -> None:
        _check_slot(slot)
        self.texture.bind(slot)
        shader.set_uniform_int(texture_uniform_name(slot), slot)
        shader.set_uniform_vec4(atlas_uniform_name(slot), self.info())

    def destroy(self) -> None:
        self.texture.free()
        self.tile_count = 0