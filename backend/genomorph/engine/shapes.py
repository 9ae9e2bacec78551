"""Renderer-agnostic drawing primitives.

Coordinates are plain floats in the output coordinate space ([0, size]).
``role`` names the palette entry the renderer should paint the primitive with.
"""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class QuadraticStroke:
    start: Point
    control: Point
    end: Point
    role: str
    width: float


@dataclass(frozen=True)
class ArcStroke:
    """Elliptical arc with equal radii (SVG ``A`` semantics)."""

    start: Point
    radius: float
    end: Point
    role: str
    width: float
    large_arc: bool = True
    sweep: bool = True


@dataclass(frozen=True)
class PolygonShape:
    points: tuple[Point, ...]
    role: str


Primitive = QuadraticStroke | ArcStroke | PolygonShape
