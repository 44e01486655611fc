"""Tests for the raster canvas."""

import numpy as np
import pytest
from PIL import Image

from svgscene.utils.colors import WHITE, Color
from svgscene.utils.geometry import Point
from svgscene.utils.rasterizer import Canvas


RED = Color(255, 0, 0)


def _filled(canvas: Canvas) -> set[tuple[int, int]]:
    """Coordinates of every non-background pixel."""
    mask = np.any(canvas.pixels != np.array(WHITE.as_tuple(), dtype=np.uint8), axis=2)
    ys, xs = np.nonzero(mask)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


def test_canvas_size_and_background():
    canvas = Canvas(30, 20, background=Color(1, 2, 3))
    assert (canvas.width(), canvas.height()) == (30, 20)
    assert canvas.pixels.shape == (20, 30, 3)
    assert canvas.pixel(29, 19) == Color(1, 2, 3)


def test_pixels_view_is_read_only():
    canvas = Canvas(4, 4)
    with pytest.raises(ValueError):
        canvas.pixels[0, 0] = (0, 0, 0)


def test_pixel_out_of_bounds():
    with pytest.raises(IndexError):
        Canvas(4, 4).pixel(4, 0)


def test_line_includes_both_endpoints():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(0, 0), Point(4, 4), RED)
    assert _filled(canvas) == {(i, i) for i in range(5)}


def test_line_is_clipped():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(-5, 3), Point(20, 3), RED)
    assert _filled(canvas) == {(x, 3) for x in range(10)}


def test_filled_ellipse():
    canvas = Canvas(20, 20)
    canvas.draw_filled_ellipse(Point(10, 10), Point(3, 2), RED)
    filled = _filled(canvas)
    assert {(10, 10), (13, 10), (7, 10), (10, 12), (10, 8)} <= filled
    assert (14, 10) not in filled
    assert (13, 12) not in filled


def test_degenerate_ellipse_is_a_segment():
    canvas = Canvas(20, 20)
    canvas.draw_filled_ellipse(Point(10, 10), Point(3, 0), RED)
    assert _filled(canvas) == {(x, 10) for x in range(7, 14)}


def test_ellipse_fully_outside_draws_nothing():
    canvas = Canvas(10, 10)
    canvas.draw_filled_ellipse(Point(-10, -10), Point(3, 3), RED)
    assert _filled(canvas) == set()


def test_filled_square_with_inclusive_edges():
    canvas = Canvas(20, 20)
    corners = [Point(5, 5), Point(15, 5), Point(15, 15), Point(5, 15)]
    canvas.draw_filled_polygon(corners, RED)
    expected = {(x, y) for x in range(5, 16) for y in range(5, 16)}
    assert _filled(canvas) == expected


def test_filled_triangle_interior():
    canvas = Canvas(20, 20)
    canvas.draw_filled_polygon([Point(0, 0), Point(10, 0), Point(0, 10)], RED)
    filled = _filled(canvas)
    assert (2, 2) in filled
    assert (8, 8) not in filled


def test_two_point_polygon_draws_its_edge():
    canvas = Canvas(10, 10)
    canvas.draw_filled_polygon([Point(1, 1), Point(5, 1)], RED)
    assert _filled(canvas) == {(x, 1) for x in range(1, 6)}


def test_save_png(tmp_path):
    canvas = Canvas(8, 6)
    canvas.draw_line(Point(0, 0), Point(7, 0), RED)
    out = tmp_path / "out.png"
    canvas.save(out)
    with Image.open(out) as img:
        assert img.size == (8, 6)
        assert img.convert("RGB").getpixel((3, 0)) == (255, 0, 0)
        assert img.convert("RGB").getpixel((3, 3)) == (255, 255, 255)
