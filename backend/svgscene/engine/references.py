"""Reference registry — id → node ownership for one build pass.

Nodes that carry an ``id`` are owned by the registry. Anything that needs the
node elsewhere (the positional output list, a ``use`` element) receives a
clone, so no instance is ever shared between two consumers.
"""

from __future__ import annotations

import logging

from svgscene.engine.transforms import TransformOp
from svgscene.models.shapes import Node

logger = logging.getLogger(__name__)


def href_target(href: str | None) -> str | None:
    """Extract the id from a local ``#id`` reference."""
    if not href:
        return None
    href = href.strip()
    if not href.startswith("#") or len(href) == 1:
        return None
    return href[1:]


class ReferenceRegistry:
    """Registry of referenceable nodes, scoped to a single build."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def ids(self) -> list[str]:
        return list(self._nodes)

    def register(self, node: Node) -> Node:
        """Take ownership of ``node`` and return a clone for positional use."""
        if not node.id:
            raise ValueError(f"Cannot register {node!r} without an id")
        if node.owner is not None:
            raise ValueError(f"{node!r} is owned by a group and cannot be registered")
        if node.id in self._nodes:
            logger.warning("Duplicate id %r, later definition replaces the earlier one", node.id)
        self._nodes[node.id] = node
        return node.clone()

    def lookup(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def resolve(self, href: str | None, ops: list[TransformOp]) -> Node | None:
        """Clone the referenced node and apply ``ops`` to the clone.

        Returns None when the reference is malformed or the id is unknown
        (including ids defined later in the document).
        """
        target = href_target(href)
        if target is None:
            logger.debug("Ignoring malformed reference %r", href)
            return None
        original = self._nodes.get(target)
        if original is None:
            logger.debug("Unresolved reference %r", href)
            return None

        instance = original.clone()
        for op in ops:
            instance.add_transformation(op)
        instance.apply_transformations()
        return instance
