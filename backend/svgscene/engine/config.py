"""Build configuration — defaults the scene builder falls back on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgscene.config import Settings


@dataclass
class BuildConfig:
    """Controls attribute defaulting while building a scene."""

    # Paint for shapes without a fill attribute
    default_fill: str = "black"
    # Paint for line/polyline without a stroke attribute
    default_stroke: str = "black"
    # Subtract one pixel from rect width/height (the canvas draws polygon edges inclusively)
    rect_inclusive_edges: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> BuildConfig:
        return cls(
            default_fill=settings.default_fill,
            default_stroke=settings.default_stroke,
            rect_inclusive_edges=settings.rect_inclusive_edges,
        )
