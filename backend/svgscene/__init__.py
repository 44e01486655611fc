"""svgscene — SVG scene graph with transform resolution and PNG rendering."""

from svgscene.convert import convert, render
from svgscene.engine.config import BuildConfig
from svgscene.engine.context import Scene
from svgscene.svg.builder import SVGLoadError, build_scene, load_scene, parse_scene

__all__ = [
    "BuildConfig",
    "SVGLoadError",
    "Scene",
    "build_scene",
    "convert",
    "load_scene",
    "parse_scene",
    "render",
]

__version__ = "0.1.0"
