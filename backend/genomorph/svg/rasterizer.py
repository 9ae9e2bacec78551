"""SVG → PNG via cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def render_png(svg: str, width: int, height: int | None = None) -> bytes:
    """Rasterize creature SVG markup. Creatures are square, so ``height`` follows ``width`` unless given."""
    import cairosvg

    if height is None:
        height = width
    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("cairosvg could not rasterize a %dx%d creature: %s", width, height, e)
        raise
