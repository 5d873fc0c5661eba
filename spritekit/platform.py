"""Window, OpenGL context, input and time."""

from __future__ import annotations

import time


class PlatformError(RuntimeError):
    """Raised when the window or OpenGL context cannot be set up."""


class Platform:
    """A window with an OpenGL 3.3 core context."""

    def __init__(self, title: str, width: int, height: int):
        if not isinstance(title, str):
            raise PlatformError("title must be a string")
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise PlatformError(f"{name} must be a positive integer")

        self._start = time.perf_counter()
        try:
            import pyglet
            from pyglet import gl
            from pyglet.gl import gl_info
            from pyglet.window import key
        except Exception as exc:
            raise PlatformError(f"Failed to initialize windowing: {exc}") from exc

        config = gl.Config(
            major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
        )
        try:
            self.window = pyglet.window.Window(width, height, title, config=config)
        except Exception as exc:
            raise PlatformError(f"Failed to create window: {exc}") from exc

        self._keys = key.KeyStateHandler()
        self.window.push_handlers(self._keys)
        self.window.switch_to()

        print(f"OpenGL {gl_info.get_version_string()}")
        gl.glViewport(0, 0, width, height)

    def __enter__(self) -> "Platform":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        self.window.close()

    def should_close(self) -> bool:
        return bool(self.window.has_exit)

    def poll_events(self) -> None:
        self.window.dispatch_events()

    def swap_buffers(self) -> None:
        self.window.flip()

    def set_vsync(self, enabled) -> None:
        self.window.set_vsync(bool(enabled))

    def get_time(self) -> float:
        """Seconds since the platform was created."""
        return time.perf_counter() - self._start

    def sleep(self, delay: float) -> None:
        """Wait for the given time, then handle pending events."""
        if delay > 0:
            time.sleep(delay)
        self.window.dispatch_events()

    def is_key_pressed(self, key: int) -> bool:
        return bool(self._keys[key])