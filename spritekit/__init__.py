"""Instanced 2D sprite rendering with texture atlases, a frame clock and a demo game loop."""

__version__ = "0.1.0"