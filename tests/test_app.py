import pytest

from spritekit.app import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.title == "Test"
    assert args.width == 1200
    assert args.height == 1200


def test_custom_values():
    args = parse_args(["--title", "Demo", "--width", "640", "--height", "480"])
    assert (args.title, args.width, args.height) == ("Demo", 640, 480)


def test_zero_width_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--width", "0"])


def test_non_numeric_height_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--height", "abc"])


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--height", "0"])