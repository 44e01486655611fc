"""SVG → PNG conversion and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svgscene.config import settings
from svgscene.engine.config import BuildConfig
from svgscene.engine.context import Scene
from svgscene.svg.builder import SVGLoadError, load_scene
from svgscene.utils.colors import WHITE, parse_color
from svgscene.utils.rasterizer import Canvas

logger = logging.getLogger(__name__)


def render(scene: Scene, background: str | None = None) -> Canvas:
    """Draw every root node onto a canvas of the scene's dimensions."""
    canvas = Canvas(scene.width, scene.height, parse_color(background, default=WHITE))
    scene.draw(canvas)
    return canvas


def convert(
    input_path: str | Path,
    output_path: str | Path,
    config: BuildConfig | None = None,
    background: str | None = None,
) -> Scene:
    """Load ``input_path``, render it and write a PNG to ``output_path``.

    Defaults for paint, rect edges and background come from the environment settings.
    """
    scene = load_scene(input_path, config or BuildConfig.from_settings(settings))
    canvas = render(scene, background or settings.background)
    canvas.save(output_path)
    logger.info("Wrote %s (%d×%d)", output_path, canvas.width(), canvas.height())
    return scene


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a simple SVG document to PNG")
    parser.add_argument("input", help="SVG file to read")
    parser.add_argument("output", help="PNG file to write")
    parser.add_argument("--log-level", default=settings.svgscene_log_level, help="Logging level")
    parser.add_argument(
        "--inclusive-rect-edges",
        action=argparse.BooleanOptionalAction,
        default=settings.rect_inclusive_edges,
        help="Shrink rects by one pixel so their edges cover exactly width×height",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = BuildConfig.from_settings(settings)
    config.rect_inclusive_edges = args.inclusive_rect_edges

    try:
        convert(args.input, args.output, config, background=settings.background)
    except SVGLoadError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
