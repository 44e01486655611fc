"""Raster canvas — an RGB pixel buffer with the three primitives nodes draw with.

Pixels are addressed by integer (x, y) with y growing downward. Everything
outside the canvas is clipped silently.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from svgscene.utils.colors import WHITE, Color
from svgscene.utils.geometry import Point


class Canvas:
    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self._pixels: NDArray[np.uint8] = np.empty((height, width, 3), dtype=np.uint8)
        self._pixels[:, :] = background.as_tuple()

    def width(self) -> int:
        return int(self._pixels.shape[1])

    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> NDArray[np.uint8]:
        """The (height, width, 3) buffer, read-only view."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width() and 0 <= y < self.height()

    def pixel(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width()}x{self.height()} canvas")
        r, g, b = self._pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if self.in_bounds(x, y):
            self._pixels[y, x] = color.as_tuple()

    # ── primitives ──

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Bresenham line, both endpoints included."""
        x0, y0 = start.x, start.y
        x1, y1 = end.x, end.y
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.set_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_filled_ellipse(self, center: Point, radius: Point, color: Color) -> None:
        """Fill pixels with ((x-cx)/rx)² + ((y-cy)/ry)² ≤ 1."""
        rx, ry = abs(radius.x), abs(radius.y)
        if rx == 0 or ry == 0:
            # Degenerate ellipse collapses to its axis segment
            self.draw_line(Point(center.x - rx, center.y - ry), Point(center.x + rx, center.y + ry), color)
            return

        window = self._clip_window(center.x - rx, center.y - ry, center.x + rx, center.y + ry)
        if window is None:
            return
        x0, y0, x1, y1 = window
        ys, xs = np.mgrid[y0 : y1 + 1, x0 : x1 + 1]
        nx = (xs - center.x) / rx
        ny = (ys - center.y) / ry
        mask = nx * nx + ny * ny <= 1.0
        self._pixels[y0 : y1 + 1, x0 : x1 + 1][mask] = color.as_tuple()

    def draw_filled_polygon(self, points: list[Point], color: Color) -> None:
        """Even-odd fill over pixel centers, then the edges so boundaries are inclusive."""
        if not points:
            return
        xs_p = [p.x for p in points]
        ys_p = [p.y for p in points]
        window = self._clip_window(min(xs_p), min(ys_p), max(xs_p), max(ys_p))
        if window is not None and len(points) >= 3:
            x0, y0, x1, y1 = window
            ys, xs = np.mgrid[y0 : y1 + 1, x0 : x1 + 1].astype(np.float64)
            inside = np.zeros(xs.shape, dtype=bool)
            n = len(points)
            for i in range(n):
                a = points[i]
                b = points[(i + 1) % n]
                if a.y == b.y:
                    continue
                crosses = (a.y > ys) != (b.y > ys)
                x_at = a.x + (ys - a.y) * (b.x - a.x) / (b.y - a.y)
                inside ^= crosses & (xs < x_at)
            self._pixels[y0 : y1 + 1, x0 : x1 + 1][inside] = color.as_tuple()

        for i, start in enumerate(points):
            self.draw_line(start, points[(i + 1) % len(points)], color)

    def _clip_window(self, x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int, int] | None:
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, self.width() - 1), min(y1, self.height() - 1)
        if x0 > x1 or y0 > y1:
            return None
        return (x0, y0, x1, y1)

    # ── output ──

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._pixels.copy())

    def save(self, path: str | Path) -> None:
        self.to_image().save(path, format="PNG")
