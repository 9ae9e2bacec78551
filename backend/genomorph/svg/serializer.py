"""Write SVG markup for a creature scene."""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from genomorph.engine import constants as C
from genomorph.engine.palette import Gradient, PaletteScene
from genomorph.engine.scene import Circle, CreatureScene
from genomorph.engine.shapes import ArcStroke, Point, PolygonShape, Primitive, QuadraticStroke

_ID_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9\-_]")

# Ornament roles painted with a gradient rather than a flat fill.
_GRADIENT_ROLES = {"shell"}


def fmt(v: float) -> str:
    """Up to 4 decimals, trailing zeros dropped."""
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def _pt(p: Point) -> str:
    return f"{fmt(p[0])} {fmt(p[1])}"


def _points(points: tuple[Point, ...]) -> str:
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)


_ID_STEMS = {"body": "grad", "glow": "glow", "shell": "shell"}


def gradient_ids(prefix: str) -> dict[str, str]:
    """Element ids for the three gradients, restricted to [A-Za-z0-9_-]."""
    return {name: _ID_UNSAFE_RE.sub("", f"{stem}-{prefix}") for name, stem in _ID_STEMS.items()}


def _url(element_id: str) -> str:
    return f"url(#{element_id})"


def default_id_prefix(scene: CreatureScene) -> str:
    parts = (scene.genome, scene.seed or "", fmt(scene.size))
    return "-".join(p for p in parts if p)


def _gradient_lines(g: Gradient, element_id: str) -> list[str]:
    tag = "radialGradient" if g.kind == "radial" else "linearGradient"
    attrs = " ".join(f'{k}="{v}"' for k, v in g.attrs)
    lines = [f'    <{tag} id="{element_id}" {attrs}>']
    for stop in g.stops:
        opacity = "" if stop.opacity is None else f' stop-opacity="{fmt(stop.opacity)}"'
        lines.append(f'      <stop offset="{stop.offset}" stop-color="{stop.color.css()}"{opacity} />')
    lines.append(f"    </{tag}>")
    return lines


def _paint(role: str, palette: PaletteScene, ids: dict[str, str]) -> str:
    if role in _GRADIENT_ROLES:
        return _url(ids[role])
    return palette.fill(role).css()


def _primitive(prim: Primitive, palette: PaletteScene, ids: dict[str, str]) -> str:
    paint = _paint(prim.role, palette, ids)
    if isinstance(prim, QuadraticStroke):
        d = f"M {_pt(prim.start)} Q {_pt(prim.control)} {_pt(prim.end)}"
        return (
            f'<path d="{d}" stroke="{paint}" stroke-width="{fmt(prim.width)}"'
            ' stroke-linecap="round" fill="none" />'
        )
    if isinstance(prim, ArcStroke):
        r = fmt(prim.radius)
        d = f"M {_pt(prim.start)} A {r} {r} 0 {int(prim.large_arc)} {int(prim.sweep)} {_pt(prim.end)}"
        return f'<path d="{d}" stroke="{paint}" stroke-width="{fmt(prim.width)}" fill="none" />'
    if isinstance(prim, PolygonShape):
        return f'<polygon points="{_points(prim.points)}" fill="{paint}" />'
    raise TypeError(f"Unknown primitive: {type(prim).__name__}")


def _circle(c: Circle, fill: str) -> str:
    return f'<circle cx="{fmt(c.cx)}" cy="{fmt(c.cy)}" r="{fmt(c.r)}" fill="{fill}" />'


def scene_to_svg(scene: CreatureScene, id_prefix: str | None = None) -> str:
    """Render the scene as a standalone SVG document.

    ``id_prefix`` keeps gradient ids unique when several creatures share one
    HTML page; it defaults to ``<genome>-<seed>-<size>``.
    """
    size = fmt(scene.size)
    palette = scene.palette
    params = scene.parameters
    ids = gradient_ids(id_prefix if id_prefix is not None else default_id_prefix(scene))

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}"'
        f' viewBox="0 0 {size} {size}" role="img">',
    ]
    if scene.label:
        lines.append(f"  <title>{escape(scene.label)}</title>")

    lines.append("  <defs>")
    for g in palette.gradients:
        lines.extend(_gradient_lines(g, ids[g.name]))
    lines.append("  </defs>")

    opacity = C.ORNAMENT_OPACITY[params.variant]
    lines.append(f'  <g class="ornament-{scene.geometry.ornament}" opacity="{fmt(opacity)}">')
    for prim in scene.geometry.ornaments:
        lines.append(f"    {_primitive(prim, palette, ids)}")
    lines.append("  </g>")

    lines.append(f"  {_circle(scene.glow, _url(ids['glow']))}")
    lines.append(
        f'  <polygon points="{_points(scene.geometry.vertices)}"'
        f' fill="{palette.fill("silhouette").css()}" opacity="{fmt(C.SILHOUETTE_OPACITY)}" />'
    )
    lines.append(f"  {_circle(scene.body, _url(ids['body']))}")
    lines.append(f"  {_circle(scene.core, palette.fill('core').css())}")
    for eye in scene.eyes:
        lines.append(f"  {_circle(eye, C.EYE_COLOR)}")

    if scene.label:
        lines.append(
            f'  <text x="{size}" y="{size}" dx="-2" dy="-2" text-anchor="end"'
            f' font-size="{fmt(max(scene.size / 10, 8))}" fill="#ffffff">{escape(scene.label)}</text>'
        )

    lines.append("</svg>")
    return "\n".join(lines)
