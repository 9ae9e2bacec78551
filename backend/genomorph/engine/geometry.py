"""Geometry synthesis: body silhouette and the variant's ornaments."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from genomorph.engine import constants as C
from genomorph.engine import ornaments  # noqa: F401  (registers the variants)
from genomorph.engine.parameters import VisualParameters
from genomorph.engine.registry import get_registry
from genomorph.engine.shapes import Point, Primitive
from genomorph.utils.geometry import polar_to_xy, ring_angles, to_polygon


@dataclass(frozen=True)
class GeometryScene:
    size: float
    center: float
    base_radius: float
    # Closed ring; the last vertex joins the first.
    vertices: tuple[Point, ...]
    ornament: str
    ornaments: tuple[Primitive, ...]

    @property
    def silhouette_area(self) -> float:
        return float(to_polygon(list(self.vertices)).area)


def silhouette(params: VisualParameters, center: float, radius: float) -> tuple[Point, ...]:
    """Wobbling star outline: r = base·(0.82 + 0.18·sin((θ + twist·0.01)·wobble))."""
    angles = ring_angles(params.spike_count)
    wave = np.sin((angles + params.twist * C.TWIST_ANGLE_SCALE) * params.wobble) * C.SILHOUETTE_AMPLITUDE
    radii = radius * (C.SILHOUETTE_MEAN + wave)
    xy = polar_to_xy(center, radii, angles)
    return tuple((float(x), float(y)) for x, y in xy)


def synthesize_geometry(params: VisualParameters, size: float = 96) -> GeometryScene:
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if params.spike_count > C.MAX_SPIKES or abs(params.twist) > C.MAX_TWIST:
        raise ValueError(f"stage out of renderable range (max {C.MAX_SPIKES} spikes)")

    center = size / 2
    radius = size * C.BASE_RADIUS_FRACTION
    spec = get_registry().get(params.variant)

    return GeometryScene(
        size=float(size),
        center=center,
        base_radius=radius,
        vertices=silhouette(params, center, radius),
        ornament=spec.name,
        ornaments=spec.fn(params, center, radius),
    )
