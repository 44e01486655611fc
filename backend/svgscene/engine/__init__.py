"""Transform pipeline and build-pass state."""

from svgscene.engine.transforms import Rotate, Scale, TransformOp, Translate, apply_op, parse_transform

__all__ = [
    "Rotate",
    "Scale",
    "TransformOp",
    "Translate",
    "apply_op",
    "parse_transform",
]
