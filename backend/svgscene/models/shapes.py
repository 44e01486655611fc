"""Shape model — drawable scene-graph nodes.

Every node supports the same contract: draw onto a canvas, translate, scale
and rotate its geometry, clone itself, and hold a queue of pending transform
operations that ``apply_transformations`` consumes exactly once.

Rotation only moves position-bearing points. Circle and Ellipse rotate their
center, Rectangle rotates its top-left corner; radii and width/height stay
axis-aligned.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

from svgscene.engine.transforms import TransformOp, apply_op
from svgscene.utils.colors import Color
from svgscene.utils.geometry import Point, bbox, scale_length

if TYPE_CHECKING:
    from svgscene.models.group import Group

logger = logging.getLogger(__name__)

BBox = tuple[int, int, int, int]


class DrawTarget(Protocol):
    """The raster operations nodes draw with."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def draw_filled_ellipse(self, center: Point, radius: Point, color: Color) -> None: ...

    def draw_line(self, start: Point, end: Point, color: Color) -> None: ...

    def draw_filled_polygon(self, points: list[Point], color: Color) -> None: ...


class Node(ABC):
    """Base class for all scene-graph nodes."""

    tag = ""

    def __init__(self) -> None:
        self.id: str | None = None
        self.transform_origin = Point(0, 0)
        # True once the node's own transform-origin was set explicitly
        self.origin_declared = False
        self.transformations: list[TransformOp] = []
        self._owner: Group | None = None

    # ── geometry ──

    @abstractmethod
    def draw(self, canvas: DrawTarget) -> None: ...

    @abstractmethod
    def translate(self, delta: Point) -> None: ...

    @abstractmethod
    def scale(self, origin: Point, factor: int | float) -> None: ...

    @abstractmethod
    def rotate(self, origin: Point, degrees: int | float) -> None: ...

    @abstractmethod
    def bounds(self) -> BBox | None:
        """Axis-aligned (xmin, ymin, xmax, ymax) of the node's geometry."""

    @abstractmethod
    def _copy_geometry(self) -> Node:
        """Fresh node of the same type with copied geometry and no node state."""

    # ── node state ──

    @property
    def owner(self) -> Group | None:
        return self._owner

    def set_transform_origin(self, origin: Point, inherited: bool = False) -> None:
        """Set the pivot for scale/rotate.

        An inherited origin (pushed down by a parent group) never overrides
        one the node declared itself.
        """
        if inherited and self.origin_declared:
            return
        self.transform_origin = origin
        if not inherited:
            self.origin_declared = True

    def add_transformation(self, op: TransformOp) -> None:
        self.transformations.append(op)

    def apply_transformations(self) -> None:
        """Apply queued operations in declaration order, then clear the queue."""
        pending, self.transformations = self.transformations, []
        for op in pending:
            apply_op(self, op)

    def clone(self) -> Node:
        """Deep, independent copy including id, origin and pending queue."""
        twin = self._copy_geometry()
        twin.id = self.id
        twin.transform_origin = self.transform_origin
        twin.origin_declared = self.origin_declared
        twin.transformations = list(self.transformations)
        return twin

    def __repr__(self) -> str:
        ident = f" id={self.id!r}" if self.id else ""
        return f"<{type(self).__name__}{ident} bounds={self.bounds()}>"


class Ellipse(Node):
    tag = "ellipse"

    def __init__(self, fill: Color, center: Point, radius: Point) -> None:
        super().__init__()
        self.fill = fill
        self.center = center
        self.radius = Point(abs(radius.x), abs(radius.y))

    def draw(self, canvas: DrawTarget) -> None:
        canvas.draw_filled_ellipse(self.center, self.radius, self.fill)

    def translate(self, delta: Point) -> None:
        self.center = self.center.translate(delta)

    def scale(self, origin: Point, factor: int | float) -> None:
        self.center = self.center.scale(origin, factor)
        self.radius = Point(scale_length(self.radius.x, factor), scale_length(self.radius.y, factor))

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.center = self.center.rotate(origin, degrees)

    def bounds(self) -> BBox:
        c, r = self.center, self.radius
        return (c.x - r.x, c.y - r.y, c.x + r.x, c.y + r.y)

    def _copy_geometry(self) -> Ellipse:
        return Ellipse(self.fill, self.center, self.radius)


class Circle(Node):
    tag = "circle"

    def __init__(self, fill: Color, center: Point, radius: int) -> None:
        super().__init__()
        self.fill = fill
        self.center = center
        self.radius = abs(radius)

    def draw(self, canvas: DrawTarget) -> None:
        canvas.draw_filled_ellipse(self.center, Point(self.radius, self.radius), self.fill)

    def translate(self, delta: Point) -> None:
        self.center = self.center.translate(delta)

    def scale(self, origin: Point, factor: int | float) -> None:
        self.center = self.center.scale(origin, factor)
        self.radius = scale_length(self.radius, factor)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.center = self.center.rotate(origin, degrees)

    def bounds(self) -> BBox:
        c, r = self.center, self.radius
        return (c.x - r, c.y - r, c.x + r, c.y + r)

    def _copy_geometry(self) -> Circle:
        return Circle(self.fill, self.center, self.radius)


class _PointList(Node):
    """Shared point-sequence geometry for polylines and polygons."""

    def __init__(self, color: Color, points: list[Point]) -> None:
        super().__init__()
        if not points:
            raise ValueError(f"{type(self).__name__} needs at least one point")
        self.points = list(points)
        self._color = color

    def translate(self, delta: Point) -> None:
        self.points = [p.translate(delta) for p in self.points]

    def scale(self, origin: Point, factor: int | float) -> None:
        self.points = [p.scale(origin, factor) for p in self.points]

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.points = [p.rotate(origin, degrees) for p in self.points]

    def bounds(self) -> BBox | None:
        return bbox(self.points)

    def _copy_geometry(self) -> _PointList:
        return type(self)(self._color, list(self.points))


class Polyline(_PointList):
    """Open chain of segments."""

    tag = "polyline"

    @property
    def stroke(self) -> Color:
        return self._color

    def draw(self, canvas: DrawTarget) -> None:
        for start, end in zip(self.points, self.points[1:]):
            canvas.draw_line(start, end, self.stroke)


class Polygon(_PointList):
    """Closed, filled point sequence."""

    tag = "polygon"

    @property
    def fill(self) -> Color:
        return self._color

    def draw(self, canvas: DrawTarget) -> None:
        canvas.draw_filled_polygon(list(self.points), self.fill)


class Line(Node):
    tag = "line"

    def __init__(self, stroke: Color, start: Point, end: Point) -> None:
        super().__init__()
        self.stroke = stroke
        self.start = start
        self.end = end

    def draw(self, canvas: DrawTarget) -> None:
        canvas.draw_line(self.start, self.end, self.stroke)

    def translate(self, delta: Point) -> None:
        self.start = self.start.translate(delta)
        self.end = self.end.translate(delta)

    def scale(self, origin: Point, factor: int | float) -> None:
        self.start = self.start.scale(origin, factor)
        self.end = self.end.scale(origin, factor)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.start = self.start.rotate(origin, degrees)
        self.end = self.end.rotate(origin, degrees)

    def bounds(self) -> BBox | None:
        return bbox([self.start, self.end])

    def _copy_geometry(self) -> Line:
        return Line(self.stroke, self.start, self.end)


class Rectangle(Node):
    """Axis-aligned rectangle, drawn as the polygon TL, TR, BR, BL."""

    tag = "rect"

    def __init__(self, fill: Color, upper_left: Point, width: int, height: int) -> None:
        super().__init__()
        if width < 0 or height < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {width}x{height}")
        self.fill = fill
        self.upper_left = upper_left
        self.width = width
        self.height = height

    def corners(self) -> list[Point]:
        tl = self.upper_left
        return [
            tl,
            Point(tl.x + self.width, tl.y),
            Point(tl.x + self.width, tl.y + self.height),
            Point(tl.x, tl.y + self.height),
        ]

    def draw(self, canvas: DrawTarget) -> None:
        canvas.draw_filled_polygon(self.corners(), self.fill)

    def translate(self, delta: Point) -> None:
        self.upper_left = self.upper_left.translate(delta)

    def scale(self, origin: Point, factor: int | float) -> None:
        # Scale opposite corners so a mirroring factor keeps TL the top-left
        a = self.upper_left.scale(origin, factor)
        b = Point(self.upper_left.x + self.width, self.upper_left.y + self.height).scale(origin, factor)
        self.upper_left = Point(min(a.x, b.x), min(a.y, b.y))
        self.width = abs(b.x - a.x)
        self.height = abs(b.y - a.y)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        self.upper_left = self.upper_left.rotate(origin, degrees)

    def bounds(self) -> BBox | None:
        return bbox(self.corners())

    def _copy_geometry(self) -> Rectangle:
        return Rectangle(self.fill, self.upper_left, self.width, self.height)
