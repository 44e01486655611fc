"""Transform pipeline — parsed, value-snapshotted transform operations.

A ``transform`` attribute such as ``"translate(5 5) rotate(90) scale(2)"`` is
parsed into an ordered list of plain records. Each record carries its own
operands, including a copy of the transform origin in effect when it was
parsed, so nothing is read from the node at application time.

Usage:
    ops = parse_transform('translate(5, 5) scale(2)', origin=Point(0, 0))
    for op in ops:
        node.add_transformation(op)
    node.apply_transformations()
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from svgscene.utils.geometry import Point, as_factor, round_half_up

if TYPE_CHECKING:
    from svgscene.models.shapes import Node

logger = logging.getLogger(__name__)

_CALL_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")
_ARG_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Translate:
    dx: int
    dy: int

    @property
    def delta(self) -> Point:
        return Point(self.dx, self.dy)


@dataclass(frozen=True)
class Scale:
    origin: Point
    factor: int | float


@dataclass(frozen=True)
class Rotate:
    origin: Point
    degrees: int | float


TransformOp = Union[Translate, Scale, Rotate]


def apply_op(node: Node, op: TransformOp) -> None:
    """Run one operation against a node's mutators."""
    if isinstance(op, Translate):
        node.translate(op.delta)
    elif isinstance(op, Scale):
        node.scale(op.origin, op.factor)
    elif isinstance(op, Rotate):
        node.rotate(op.origin, op.degrees)
    else:
        raise TypeError(f"Unknown transform operation: {op!r}")


def _parse_args(raw: str) -> list[float] | None:
    raw = raw.strip()
    if not raw:
        return []
    try:
        values = [float(tok) for tok in _ARG_SPLIT_RE.split(raw) if tok]
    except ValueError:
        return None
    # inf, nan and overflowing literals have no place on the pixel grid
    if not all(math.isfinite(v) for v in values):
        return None
    return values


def _build_op(name: str, args: list[float], origin: Point) -> TransformOp | None:
    if name == "translate":
        if not args:
            return None
        dy = args[1] if len(args) > 1 else 0.0
        return Translate(round_half_up(args[0]), round_half_up(dy))

    if name == "scale":
        if not args:
            return None
        if len(args) > 1 and args[1] != args[0]:
            logger.debug("Non-uniform scale(%s) reduced to its x factor", args)
        return Scale(origin, as_factor(args[0]))

    if name == "rotate":
        if not args:
            return None
        # rotate(a cx cy) pivots on its own center instead of the origin
        if len(args) >= 3:
            pivot = Point(round_half_up(args[1]), round_half_up(args[2]))
            return Rotate(pivot, as_factor(args[0]))
        return Rotate(origin, as_factor(args[0]))

    return None


def parse_transform(text: str | None, origin: Point = Point(0, 0)) -> list[TransformOp]:
    """Parse a transform attribute into operations, in declaration order.

    Calls whose arguments fail to parse, and unsupported functions, are
    skipped individually; the remaining calls are still returned.
    """
    if not text:
        return []

    ops: list[TransformOp] = []
    for match in _CALL_RE.finditer(text):
        name = match.group(1).lower()
        args = _parse_args(match.group(2))
        op = None if args is None else _build_op(name, args, origin)
        if op is None:
            logger.debug("Skipping transform call %r", match.group(0))
            continue
        ops.append(op)
    return ops
