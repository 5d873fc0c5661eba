"""Dense sprite storage with stable handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

DEFAULT_CAPACITY = 100
_U16 = 0xFFFF


@dataclass
class SpriteInstance:
    """Per-instance sprite attributes uploaded to the GPU."""

    position: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    uv_index: int = 0
    tex_index: int = 0
    flip: bool = False


@dataclass
class _Animation:
    first_frame: int = 0
    frame_span: int = 0
    tick_rate: int = 0
    last_tick: int = 0


class StaticSpriteBuffer:
    """Packed array of sprites addressed through reusable handles."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._instances: list[SpriteInstance] = []
        self._index_to_handle: list[int] = []
        self._handle_to_index: dict[int, int] = {}
        self._free_handles: list[int] = []

    def create(self) -> int:
        """Add a sprite and return its handle."""
        if len(self._instances) >= self.capacity:
            raise IndexError("sprite buffer is full")
        index = len(self._instances)
        handle = self._free_handles.pop() if self._free_handles else index
        self._instances.append(SpriteInstance())
        self._index_to_handle.append(handle)
        self._handle_to_index[handle] = index
        self._on_create()
        return handle

    def remove(self, handle: int) -> None:
        """Remove a sprite, moving the last one into its slot."""
        index = self.index_of(handle)
        last_index = len(self._instances) - 1
        if index != last_index:
            last_handle = self._index_to_handle[last_index]
            self._instances[index] = self._instances[last_index]
            self._index_to_handle[index] = last_handle
            self._handle_to_index[last_handle] = index
            self._on_move(last_index, index)
        self._instances.pop()
        self._index_to_handle.pop()
        self._on_pop()
        del self._handle_to_index[handle]
        self._free_handles.append(handle)

    def index_of(self, handle: int) -> int:
        """Dense index of a live handle."""
        try:
            return self._handle_to_index[handle]
        except KeyError:
            raise KeyError(f"unknown sprite handle {handle}") from None

    def instance(self, handle: int) -> SpriteInstance:
        return self._instances[self.index_of(handle)]

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[SpriteInstance]:
        return iter(self._instances)

    def _on_create(self) -> None:
        pass

    def _on_move(self, src: int, dst: int) -> None:
        pass

    def _on_pop(self) -> None:
        pass


class AnimatedSpriteBuffer(StaticSpriteBuffer):
    """Sprite buffer whose sprites cycle through atlas frames on ticks."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        super().__init__(capacity)
        self._animations: list[_Animation] = []

    def set_animation(self, handle: int, first_frame: int, frame_span: int, tick_rate: int) -> None:
        """Configure frames first_frame..first_frame+frame_span advancing every tick_rate ticks."""
        index = self.index_of(handle)
        self._animations[index] = _Animation(
            first_frame & _U16, frame_span & _U16, tick_rate & _U16, 0
        )
        self._instances[index].uv_index = first_frame & _U16

    def update_animations(self, current_tick: int) -> None:
        """Advance each sprite whose tick rate has elapsed."""
        current_tick &= _U16
        for instance, anim in zip(self._instances, self._animations):
            elapsed = (current_tick - anim.last_tick) & _U16
            if elapsed >= anim.tick_rate:
                anim.last_tick = current_tick
                instance.uv_index = (instance.uv_index + 1) & _U16
                if instance.uv_index - anim.first_frame > anim.frame_span:
                    instance.uv_index = anim.first_frame

    def _on_create(self) -> None:
        self._animations.append(_Animation())

    def _on_move(self, src: int, dst: int) -> None:
        self._animations[dst] = self._animations[src]

    def _on_pop(self) -> None:
        self._animations.pop()