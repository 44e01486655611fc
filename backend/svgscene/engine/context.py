"""Scene — the result of one build pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgscene.engine.references import ReferenceRegistry
from svgscene.models.shapes import BBox, DrawTarget, Node
from svgscene.utils.geometry import Point, union_bbox


@dataclass
class Scene:
    """Root-level drawable nodes in document order, plus canvas size."""

    # (width, height) read from the document root
    dimensions: Point = field(default_factory=Point)
    nodes: list[Node] = field(default_factory=list)
    # Id'd nodes owned by the build that produced this scene
    registry: ReferenceRegistry = field(default_factory=ReferenceRegistry)

    @property
    def width(self) -> int:
        return self.dimensions.x

    @property
    def height(self) -> int:
        return self.dimensions.y

    def draw(self, canvas: DrawTarget) -> None:
        """Paint every root node, back to front."""
        for node in self.nodes:
            node.draw(canvas)

    def bounds(self) -> BBox | None:
        return union_bbox([node.bounds() for node in self.nodes])
