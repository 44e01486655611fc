"""Tests for color parsing."""

import pytest

from svgscene.utils.colors import BLACK, WHITE, Color, parse_color


def test_hex_colors():
    assert parse_color("#ff0000") == Color(255, 0, 0)
    assert parse_color("#00FF7f") == Color(0, 255, 127)
    assert parse_color("#abc") == Color(0xAA, 0xBB, 0xCC)


def test_rgb_function():
    assert parse_color("rgb(1, 2, 3)") == Color(1, 2, 3)
    assert parse_color("RGB(300,0,0)") == Color(255, 0, 0)


def test_named_colors():
    assert parse_color("black") == BLACK
    assert parse_color("White") == WHITE
    assert parse_color(" red ") == Color(255, 0, 0)


def test_fallbacks():
    assert parse_color(None) == BLACK
    assert parse_color("") == BLACK
    assert parse_color("not-a-color", default=WHITE) == WHITE
    assert parse_color("#12345", default=WHITE) == WHITE


def test_channel_range_validated():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)
