"""Scene builder — walks an SVG document and produces transform-resolved nodes.

One depth-first pass over the element tree. Each recognized element becomes a
node whose transform queue is populated and applied before the node is handed
to its parent. Nodes with an ``id`` go to the pass's reference registry; their
parent receives a clone. ``use`` elements clone a registered node and apply
their own transform to the clone.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable

from svgscene.engine.config import BuildConfig
from svgscene.engine.context import Scene
from svgscene.engine.references import ReferenceRegistry
from svgscene.engine.transforms import TransformOp, Translate, parse_transform
from svgscene.models.group import Group
from svgscene.models.shapes import Circle, Ellipse, Line, Node, Polygon, Polyline, Rectangle
from svgscene.svg.attributes import (
    href_attr,
    int_attr,
    parse_origin,
    parse_points,
    str_attr,
    strip_ns,
)
from svgscene.utils.colors import Color, parse_color
from svgscene.utils.geometry import Point

logger = logging.getLogger(__name__)


class SVGLoadError(RuntimeError):
    """The document could not be read or parsed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = str(path)
        message = f"Unable to load {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SceneBuilder:
    """Builds one scene. Create a new builder per document."""

    def __init__(self, config: BuildConfig | None = None) -> None:
        self.config = config or BuildConfig()
        self.registry = ReferenceRegistry()
        self._default_fill = parse_color(self.config.default_fill)
        self._default_stroke = parse_color(self.config.default_stroke)
        self._leaf_factories: dict[str, Callable[[ET.Element], Node]] = {
            "ellipse": self._ellipse,
            "circle": self._circle,
            "line": self._line,
            "polyline": self._polyline,
            "polygon": self._polygon,
            "rect": self._rect,
        }

    def build(self, root: ET.Element) -> Scene:
        if strip_ns(root.tag) != "svg":
            logger.warning("Root element is <%s>, expected <svg>", strip_ns(root.tag))
        dimensions = Point(max(int_attr(root, "width"), 0), max(int_attr(root, "height"), 0))
        nodes = self._build_children(root, Point(0, 0))
        logger.info(
            "Built scene: %d root nodes, %d referenceable, canvas %d×%d",
            len(nodes), len(self.registry), dimensions.x, dimensions.y,
        )
        return Scene(dimensions=dimensions, nodes=nodes, registry=self.registry)

    # ── traversal ──

    def _build_children(self, parent: ET.Element, origin: Point) -> list[Node]:
        nodes: list[Node] = []
        for child in parent:
            if not isinstance(child.tag, str):
                continue  # comments, processing instructions
            node = self._build_element(child, origin)
            if node is not None:
                nodes.append(node)
        return nodes

    def _build_element(self, element: ET.Element, origin: Point) -> Node | None:
        tag = strip_ns(element.tag)

        if tag == "use":
            return self._use(element, origin)

        if tag == "g":
            node: Node = Group()
            self._set_origin(node, element, origin)
            for child in self._build_children(element, node.transform_origin):
                node.add_element(child)
        elif tag in self._leaf_factories:
            node = self._leaf_factories[tag](element)
            self._set_origin(node, element, origin)
        else:
            logger.debug("Skipping unsupported element <%s>", tag)
            return None

        self._queue_transform(node, element)
        node.apply_transformations()
        return self._emit(node, element)

    def _set_origin(self, node: Node, element: ET.Element, inherited: Point) -> None:
        declared = parse_origin(element.get("transform-origin"))
        if declared is not None:
            node.set_transform_origin(declared)
        else:
            node.set_transform_origin(inherited, inherited=True)

    def _queue_transform(self, node: Node, element: ET.Element) -> None:
        for op in parse_transform(element.get("transform"), node.transform_origin):
            node.add_transformation(op)

    def _emit(self, node: Node, element: ET.Element) -> Node:
        node_id = str_attr(element, "id")
        if node_id is None:
            return node
        node.id = node_id.strip()
        return self.registry.register(node)

    def _use(self, element: ET.Element, inherited: Point) -> Node | None:
        declared = parse_origin(element.get("transform-origin"))
        origin = declared if declared is not None else inherited

        ops: list[TransformOp] = []
        x, y = int_attr(element, "x"), int_attr(element, "y")
        if x or y:
            ops.append(Translate(x, y))
        ops.extend(parse_transform(element.get("transform"), origin))

        return self.registry.resolve(href_attr(element), ops)

    # ── leaf factories ──

    def _fill(self, element: ET.Element) -> Color:
        return parse_color(str_attr(element, "fill"), default=self._default_fill)

    def _stroke(self, element: ET.Element) -> Color:
        return parse_color(str_attr(element, "stroke"), default=self._default_stroke)

    def _ellipse(self, element: ET.Element) -> Node:
        center = Point(int_attr(element, "cx"), int_attr(element, "cy"))
        radius = Point(int_attr(element, "rx"), int_attr(element, "ry"))
        return Ellipse(self._fill(element), center, radius)

    def _circle(self, element: ET.Element) -> Node:
        center = Point(int_attr(element, "cx"), int_attr(element, "cy"))
        return Circle(self._fill(element), center, int_attr(element, "r"))

    def _line(self, element: ET.Element) -> Node:
        start = Point(int_attr(element, "x1"), int_attr(element, "y1"))
        end = Point(int_attr(element, "x2"), int_attr(element, "y2"))
        return Line(self._stroke(element), start, end)

    def _points(self, element: ET.Element) -> list[Point]:
        points = parse_points(element.get("points"))
        if not points:
            logger.debug("<%s> without points, using a single (0, 0)", strip_ns(element.tag))
            points = [Point(0, 0)]
        return points

    def _polyline(self, element: ET.Element) -> Node:
        return Polyline(self._stroke(element), self._points(element))

    def _polygon(self, element: ET.Element) -> Node:
        return Polygon(self._fill(element), self._points(element))

    def _rect(self, element: ET.Element) -> Node:
        upper_left = Point(int_attr(element, "x"), int_attr(element, "y"))
        width = int_attr(element, "width")
        height = int_attr(element, "height")
        if self.config.rect_inclusive_edges:
            width -= 1
            height -= 1
        return Rectangle(self._fill(element), upper_left, max(width, 0), max(height, 0))


def build_scene(root: ET.Element, config: BuildConfig | None = None) -> Scene:
    """Build a scene from an already-parsed ``<svg>`` root element."""
    return SceneBuilder(config).build(root)


def parse_scene(svg_text: str, config: BuildConfig | None = None) -> Scene:
    """Build a scene from SVG source text."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SVGLoadError("<string>", str(e)) from e
    return build_scene(root, config)


def load_scene(path: str | Path, config: BuildConfig | None = None) -> Scene:
    """Read and build the SVG document at ``path``."""
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as e:
        raise SVGLoadError(path, str(e)) from e
    logger.debug("Loaded %s", path)
    return build_scene(tree.getroot(), config)
