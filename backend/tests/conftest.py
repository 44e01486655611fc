"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgscene.utils.colors import Color
from svgscene.utils.geometry import Point


RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">
  <rect x="0" y="0" width="10" height="10" fill="#ff0000" transform="translate(5 5)"/>
</svg>'''

SCALED_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <g transform="scale(2)">
    <circle cx="1" cy="1" r="1" fill="#00ff00"/>
  </g>
</svg>'''

USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="40" height="20">
  <circle id="c1" cx="5" cy="5" r="3" fill="#0000ff"/>
  <use href="#c1" transform="translate(10 0)"/>
</svg>'''

MISSING_USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">
  <circle cx="5" cy="5" r="3" fill="red"/>
  <use href="#missing"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="64" height="48">
  <!-- every supported element once -->
  <ellipse cx="10" cy="10" rx="6" ry="3" fill="navy"/>
  <circle cx="30" cy="10" r="4" fill="#abc"/>
  <line x1="0" y1="20" x2="20" y2="20"/>
  <polyline points="0,30 10,35 20,30" stroke="green"/>
  <polygon points="30,30 40,30 35,40" fill="purple"/>
  <rect x="44" y="4" width="8" height="6" fill="orange"/>
  <text x="1" y="1">ignored</text>
  <g id="pair" transform="translate(0 5)">
    <circle cx="50" cy="30" r="2" fill="black"/>
    <desc>ignored too</desc>
    <circle cx="56" cy="30" r="2" fill="black"/>
  </g>
  <use xlink:href="#pair" x="0" y="8"/>
</svg>'''


class RecordingCanvas:
    """Canvas double that records every primitive call."""

    def __init__(self, width: int = 100, height: int = 100) -> None:
        self._width = width
        self._height = height
        self.calls: list[tuple] = []

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def draw_filled_ellipse(self, center: Point, radius: Point, color: Color) -> None:
        self.calls.append(("ellipse", center, radius, color))

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        self.calls.append(("line", start, end, color))

    def draw_filled_polygon(self, points: list[Point], color: Color) -> None:
        self.calls.append(("polygon", list(points), color))


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def svg_file(tmp_path):
    """Write SVG text to a temp file and return its path."""

    def _write(text: str, name: str = "input.svg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
