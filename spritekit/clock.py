"""Frame timing: delta time, elapsed time, FPS counting and frame capping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

_TICK_MASK = 0xFFFF


@dataclass(frozen=True)
class ClockSettings:
    """Static clock configuration."""

    tick_interval: int = 256


class Clock:
    """Tracks per-frame timing from an external time source."""

    def __init__(self, time_source: Callable[[], float], sleep: Callable[[float], None]):
        self._time_source = time_source
        self._sleep = sleep
        self.time_start = 0.0
        self.time_now = 0.0
        self.time_last = 0.0
        self.elapsed_time = 0.0
        self.tick_accumulator = 0.0
        self.delta_time = 0.0
        self.current_tick = 0
        self.target_frame_time = 0.0
        self.fps_timer = 0.0
        self.fps = 0
        self.frame_count = 0
        self.target_fps = 0

    def start(self) -> None:
        """Reset the reference times; call once at startup."""
        self.time_start = self._time_source()
        self.time_now = self._time_source()
        self.time_last = self.time_now

    def update(self) -> None:
        """Advance timing by one frame."""
        self.time_last = self.time_now
        self.time_now = self._time_source()
        self.delta_time = self.time_now - self.time_last
        self.tick_accumulator += self.delta_time
        self.elapsed_time = self.time_now - self.time_start

        self.fps_timer += self.delta_time
        self.frame_count += 1
        if self.fps_timer >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.fps_timer = 0.0

    def tick(self) -> None:
        """Advance the 16-bit tick counter, wrapping around."""
        self.current_tick = (self.current_tick + 1) & _TICK_MASK

    def raw_time(self) -> float:
        """Current time straight from the time source."""
        return self._time_source()

    def set_target_fps(self, fps: int) -> None:
        """Set a frame-rate cap; zero or less disables it."""
        self.target_fps = fps
        self.target_frame_time = 1.0 / fps if fps > 0 else 0.0

    def wait_for_frame_end(self) -> None:
        """Sleep for what remains of the target frame time, if anything."""
        if self.target_fps <= 0:
            return
        frame_duration = self._time_source() - self.time_now
        delay = self.target_frame_time - frame_duration
        if delay > 0:
            self._sleep(delay)