"""Group — a node that owns an ordered list of child nodes.

Transforms on a group are forwarded unchanged to every child, so the whole
subtree moves as one rigid object. Children are drawn in insertion order,
later children over earlier ones.
"""

from __future__ import annotations

from svgscene.models.shapes import BBox, DrawTarget, Node
from svgscene.utils.geometry import Point, union_bbox


class Group(Node):
    tag = "g"

    def __init__(self, elements: list[Node] | None = None) -> None:
        super().__init__()
        self._elements: list[Node] = []
        for element in elements or []:
            self.add_element(element)

    @property
    def elements(self) -> tuple[Node, ...]:
        return tuple(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def add_element(self, element: Node) -> None:
        """Take exclusive ownership of ``element``.

        The child picks up the group's origin unless it declared its own.
        """
        if element is self:
            raise ValueError("A group cannot contain itself")
        if element.owner is not None:
            raise ValueError(f"{element!r} already belongs to another group")
        element.set_transform_origin(self.transform_origin, inherited=True)
        self._adopt(element)

    def _adopt(self, element: Node) -> None:
        element._owner = self
        self._elements.append(element)

    def draw(self, canvas: DrawTarget) -> None:
        for element in self._elements:
            element.draw(canvas)

    def translate(self, delta: Point) -> None:
        for element in self._elements:
            element.translate(delta)

    def scale(self, origin: Point, factor: int | float) -> None:
        for element in self._elements:
            element.scale(origin, factor)

    def rotate(self, origin: Point, degrees: int | float) -> None:
        for element in self._elements:
            element.rotate(origin, degrees)

    def set_transform_origin(self, origin: Point, inherited: bool = False) -> None:
        if inherited and self.origin_declared:
            return
        super().set_transform_origin(origin, inherited)
        for element in self._elements:
            element.set_transform_origin(origin, inherited=True)

    def bounds(self) -> BBox | None:
        return union_bbox([element.bounds() for element in self._elements])

    def _copy_geometry(self) -> Group:
        twin = Group()
        for element in self._elements:
            twin._adopt(element.clone())
        return twin

    def __repr__(self) -> str:
        ident = f" id={self.id!r}" if self.id else ""
        return f"<Group{ident} elements={len(self._elements)}>"
