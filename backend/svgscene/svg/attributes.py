"""Attribute extraction — lenient typed lookups on ElementTree elements.

Missing or malformed numbers coerce to 0 rather than failing, so a broken
attribute yields a degenerate shape instead of an error.
"""

from __future__ import annotations

import logging
import re
from xml.etree.ElementTree import Element

from svgscene.utils.geometry import Point

logger = logging.getLogger(__name__)

XLINK_HREF = "{http://www.w3.org/1999/xlink}href"

_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def to_int(value: str | None, default: int = 0) -> int:
    """Coerce the leading number of ``value`` to int, truncating fractions.

    ``"10"`` → 10, ``"10.7"`` → 10, ``"24px"`` → 24, ``"abc"`` → default.
    """
    if value is None:
        return default
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return default
    try:
        return int(float(m.group(1)))
    except (ValueError, OverflowError):
        return default


def int_attr(element: Element, name: str, default: int = 0) -> int:
    return to_int(element.get(name), default)


def str_attr(element: Element, name: str, default: str | None = None) -> str | None:
    value = element.get(name)
    if value is None or not value.strip():
        return default
    return value


def href_attr(element: Element) -> str | None:
    """``href`` with ``xlink:href`` as the fallback."""
    return element.get("href") or element.get(XLINK_HREF)


def parse_points(text: str | None) -> list[Point]:
    """Parse ``"x1,y1 x2,y2 ..."``; any mix of commas and whitespace separates numbers.

    A trailing unpaired number is dropped.
    """
    if not text:
        return []
    numbers = [to_int(tok) for tok in _NUMBER_RE.findall(text)]
    if len(numbers) % 2:
        logger.debug("Dropping unpaired coordinate in points %r", text)
    return [Point(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]


def parse_origin(text: str | None) -> Point | None:
    """Parse a ``transform-origin`` of the form ``"x y"``; None when absent."""
    if text is None or not text.strip():
        return None
    numbers = [to_int(tok) for tok in _NUMBER_RE.findall(text)]
    if not numbers:
        return Point(0, 0)
    x = numbers[0]
    y = numbers[1] if len(numbers) > 1 else 0
    return Point(x, y)
