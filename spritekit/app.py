"""Application entry point: window, clock, renderer and the main loop."""

from __future__ import annotations

import argparse
import sys

from spritekit.clock import Clock
from spritekit.game import Game
from spritekit.platform import Platform, PlatformError
from spritekit.renderer import Renderer
from spritekit.shader import ShaderError

DEFAULT_TITLE = "Test"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 1200


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="spritekit", description="Run the sprite demo.")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    return parser.parse_args(argv)


def run(title: str, width: int, height: int) -> None:
    """Open a window and run the game until it is closed."""
    platform = Platform(title, width, height)
    try:
        clock = Clock(platform.get_time, platform.sleep)
        clock.start()
        renderer = Renderer()
        renderer.init()
        game = Game(platform, clock, renderer)
        game.init()
        while not platform.should_close():
            clock.update()
            game.update(clock.delta_time)
            game.render()
            platform.swap_buffers()
            platform.poll_events()
    finally:
        platform.shutdown()


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        run(args.title, args.width, args.height)
    except (PlatformError, ShaderError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())