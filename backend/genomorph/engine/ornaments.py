"""The three ornament styles layered onto the body silhouette."""

from __future__ import annotations

import math

from genomorph.engine import constants as C
from genomorph.engine.parameters import VisualParameters
from genomorph.engine.registry import ornament
from genomorph.engine.shapes import ArcStroke, Point, PolygonShape, Primitive, QuadraticStroke


def _polar(center: float, distance: float, angle: float) -> Point:
    return (center + math.cos(angle) * distance, center + math.sin(angle) * distance)


@ornament(variant=0, name="tentacles", description="Six curved strokes radiating at 60° steps")
def tentacles(params: VisualParameters, center: float, radius: float) -> tuple[Primitive, ...]:
    inner = radius * C.TENTACLE_INNER
    outer = radius * C.TENTACLE_OUTER
    ctrl = radius * (
        C.TENTACLE_CONTROL + (params.ornament_byte % C.TENTACLE_CONTROL_MOD) * C.TENTACLE_CONTROL_STEP
    )
    strokes = []
    for i in range(C.TENTACLE_COUNT):
        angle = (math.pi * 2 * i) / C.TENTACLE_COUNT
        strokes.append(
            QuadraticStroke(
                start=_polar(center, inner, angle),
                control=_polar(center, ctrl, angle),
                end=_polar(center, outer, angle),
                role="tentacle",
                width=C.TENTACLE_STROKE,
            )
        )
    return tuple(strokes)


def _ring(center: float, r: float, role: str, width: float) -> ArcStroke:
    # Start at the top of the circle; end just left of it so the ring stays open.
    top = center - r
    return ArcStroke(
        start=(center, top),
        radius=r,
        end=(center - C.SHELL_GAP, top),
        role=role,
        width=width,
    )


@ornament(variant=1, name="shell", description="Two concentric near-full rings")
def shell(params: VisualParameters, center: float, radius: float) -> tuple[Primitive, ...]:
    return (
        _ring(center, radius * C.SHELL_OUTER, "shell", C.SHELL_OUTER_STROKE),
        _ring(center, radius * C.SHELL_INNER, "inner_shell", C.SHELL_INNER_STROKE),
    )


def _offset(center: float, radius: float, dx: float, dy: float) -> Point:
    return (center + radius * dx, center + radius * dy)


@ornament(variant=2, name="ears_and_tail", description="Two mirrored ears plus a lower-right tail")
def ears_and_tail(params: VisualParameters, center: float, radius: float) -> tuple[Primitive, ...]:
    left = tuple(_offset(center, radius, -dx, dy) for dx, dy in C.EAR_POINTS)
    right = tuple(_offset(center, radius, dx, dy) for dx, dy in C.EAR_POINTS)
    tail = QuadraticStroke(
        start=_offset(center, radius, *C.TAIL_START),
        control=_offset(center, radius, *C.TAIL_CONTROL),
        end=_offset(center, radius, *C.TAIL_END),
        role="tail",
        width=C.TAIL_STROKE,
    )
    return (PolygonShape(left, "ear"), PolygonShape(right, "ear"), tail)
