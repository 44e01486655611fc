"""Leaf-node geometry helpers. No engine imports.

Points live on the integer pixel grid. Every operator that can leave the grid
(fractional scale factors, rotation) rounds half away from zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def as_factor(value: float) -> int | float:
    """Collapse integral floats to int so integer scaling stays exact."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class Point:
    """Integer (x, y) pixel coordinate. Operators return new points."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def translate(self, delta: Point) -> Point:
        return self + delta

    def scale(self, origin: Point, factor: int | float) -> Point:
        """Map to ``origin + (self - origin) * factor``."""
        return Point(
            origin.x + round_half_up((self.x - origin.x) * factor),
            origin.y + round_half_up((self.y - origin.y) * factor),
        )

    def rotate(self, origin: Point, degrees: int | float) -> Point:
        """Rotate about ``origin``; positive angles turn clockwise on a y-down canvas."""
        theta = math.radians(degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        dx = self.x - origin.x
        dy = self.y - origin.y
        return Point(
            origin.x + round_half_up(dx * cos_t - dy * sin_t),
            origin.y + round_half_up(dx * sin_t + dy * cos_t),
        )

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def scale_length(length: int, factor: int | float) -> int:
    """Scale a non-negative length; mirroring factors keep it non-negative."""
    return abs(round_half_up(length * factor))


def bbox(points: list[Point]) -> tuple[int, int, int, int] | None:
    """Compute (xmin, ymin, xmax, ymax) bounding box, or None for no points."""
    if not points:
        return None
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def union_bbox(
    boxes: list[tuple[int, int, int, int] | None],
) -> tuple[int, int, int, int] | None:
    """Union of bounding boxes, ignoring empty ones."""
    present = [b for b in boxes if b is not None]
    if not present:
        return None
    return (
        min(b[0] for b in present),
        min(b[1] for b in present),
        max(b[2] for b in present),
        max(b[3] for b in present),
    )
