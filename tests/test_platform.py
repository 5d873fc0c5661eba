import pytest

from spritekit.platform import Platform, PlatformError


def test_zero_width_rejected():
    with pytest.raises(PlatformError):
        Platform("Test", 0, 600)


def test_negative_height_rejected():
    with pytest.raises(PlatformError):
        Platform("Test", 800, -1)


def test_non_string_title_rejected():
    with pytest.raises(PlatformError):
        Platform(None, 800, 600)


def test_platform_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        Platform("Test", 800, 0)