"""Flat RGB colors and SVG color-string parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HEX6_RE = re.compile(r"^#([0-9a-fA-F]{6})$")
_HEX3_RE = re.compile(r"^#([0-9a-fA-F]{3})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE)


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

# SVG 1.1 basic color keywords
NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "silver": Color(192, 192, 192),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
    "white": WHITE,
    "maroon": Color(128, 0, 0),
    "red": Color(255, 0, 0),
    "purple": Color(128, 0, 128),
    "fuchsia": Color(255, 0, 255),
    "magenta": Color(255, 0, 255),
    "green": Color(0, 128, 0),
    "lime": Color(0, 255, 0),
    "olive": Color(128, 128, 0),
    "yellow": Color(255, 255, 0),
    "navy": Color(0, 0, 128),
    "blue": Color(0, 0, 255),
    "teal": Color(0, 128, 128),
    "aqua": Color(0, 255, 255),
    "cyan": Color(0, 255, 255),
    "orange": Color(255, 165, 0),
    "brown": Color(165, 42, 42),
    "pink": Color(255, 192, 203),
}


def parse_color(text: str | None, default: Color = BLACK) -> Color:
    """Parse ``#rrggbb``, ``#rgb``, ``rgb(r, g, b)`` or a named color.

    Unknown or empty strings fall back to ``default``.
    """
    if not text:
        return default
    value = text.strip()

    m = _HEX6_RE.match(value)
    if m:
        h = m.group(1)
        return Color(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))

    m = _HEX3_RE.match(value)
    if m:
        h = m.group(1)
        return Color(int(h[0] * 2, 16), int(h[1] * 2, 16), int(h[2] * 2, 16))

    m = _RGB_RE.match(value)
    if m:
        channels = [min(int(c), 255) for c in m.groups()]
        return Color(*channels)

    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return named

    logger.warning("Unrecognized color %r, using %s", text, default)
    return default
