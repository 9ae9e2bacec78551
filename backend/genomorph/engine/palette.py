"""Palette building: three hues → color stops, gradients and flat fills.

Saturation and lightness are fixed per role, so hue is the only thing that
varies between creatures.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

from genomorph.engine import constants as C
from genomorph.engine.parameters import VisualParameters


@dataclass(frozen=True)
class Color:
    hue: float
    saturation: float
    lightness: float

    def css(self) -> str:
        """CSS Color 4 space-separated ``hsl()``."""
        return f"hsl({_num(self.hue)} {_num(self.saturation)}% {_num(self.lightness)}%)"

    def hex(self) -> str:
        r, g, b = colorsys.hls_to_rgb(self.hue / 360.0, self.lightness / 100.0, self.saturation / 100.0)
        return "#{:02x}{:02x}{:02x}".format(*(round(c * 255) for c in (r, g, b)))


def _num(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:g}"


def hsl(hue: float, sl: tuple[int, int]) -> Color:
    return Color(hue, sl[0], sl[1])


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: Color
    opacity: float | None = None


@dataclass(frozen=True)
class Gradient:
    name: str
    kind: str  # "radial" | "linear"
    # Renderer geometry attributes, e.g. {"cx": "40%", ...}
    attrs: tuple[tuple[str, str], ...]
    stops: tuple[GradientStop, ...]


@dataclass(frozen=True)
class PaletteScene:
    highlight: Color
    body: Color
    shadow: Color
    gradients: tuple[Gradient, ...]
    # (role, color) pairs; a tuple keeps the scene immutable and hashable
    fills: tuple[tuple[str, Color], ...] = ()

    def fill(self, role: str) -> Color:
        for name, color in self.fills:
            if name == role:
                return color
        raise KeyError(role)

    def gradient(self, name: str) -> Gradient:
        for g in self.gradients:
            if g.name == name:
                return g
        raise KeyError(name)


def build_palette(params: VisualParameters) -> PaletteScene:
    highlight = hsl(params.hue2, C.HIGHLIGHT_SL)
    body = hsl(params.hue, C.BODY_SL)
    shadow = hsl(params.hue3, C.SHADOW_SL)

    gradients = (
        Gradient(
            name="body",
            kind="radial",
            attrs=(("cx", "40%"), ("cy", "35%"), ("r", "70%")),
            stops=(
                GradientStop("0%", highlight),
                GradientStop("60%", body),
                GradientStop("100%", shadow),
            ),
        ),
        Gradient(
            name="glow",
            kind="radial",
            attrs=(("cx", "50%"), ("cy", "50%"), ("r", "50%")),
            stops=(
                GradientStop("0%", hsl(params.hue2, C.GLOW_INNER_SL), C.GLOW_INNER_OPACITY),
                GradientStop("100%", hsl(params.hue3, C.GLOW_OUTER_SL), 0.0),
            ),
        ),
        Gradient(
            name="shell",
            kind="linear",
            attrs=(("x1", "0%"), ("y1", "0%"), ("x2", "100%"), ("y2", "100%")),
            stops=(
                GradientStop("0%", hsl(params.hue2, C.SHELL_LIGHT_SL)),
                GradientStop("100%", hsl(params.hue3, C.SHELL_DARK_SL)),
            ),
        ),
    )

    fills = (
        ("silhouette", hsl(params.hue3, C.SILHOUETTE_SL)),
        ("core", hsl(params.hue2, C.CORE_SL)),
        ("tentacle", hsl(params.hue2, C.TENTACLE_SL)),
        ("inner_shell", hsl(params.hue, C.INNER_SHELL_SL)),
        ("ear", hsl(params.hue3, C.EAR_SL)),
        ("tail", hsl(params.hue2, C.TAIL_SL)),
    )
    return PaletteScene(highlight=highlight, body=body, shadow=shadow, gradients=gradients, fills=fills)
