"""Scene composition: hex genome → complete renderable creature.

Decoder → Deriver → {Geometry, Palette} → CreatureScene. Each call builds a
fresh scene; nothing is cached or shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from genomorph.engine import constants as C
from genomorph.engine.decoder import genome_bytes
from genomorph.engine.geometry import GeometryScene, synthesize_geometry
from genomorph.engine.palette import PaletteScene, build_palette
from genomorph.engine.parameters import VisualParameters, derive_parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class CreatureScene:
    parameters: VisualParameters
    geometry: GeometryScene
    palette: PaletteScene
    # Aura glow behind everything
    glow: Circle
    # Gradient-filled body disc
    body: Circle
    core: Circle
    eyes: tuple[Circle, Circle]
    label: str | None = None
    # Source hex text, kept for naming rendered elements
    genome: str = ""
    seed: str | None = None

    @property
    def size(self) -> float:
        return self.geometry.size


def compose_scene(
    params: VisualParameters,
    size: float = 96,
    label: str | None = None,
    genome: str = "",
    seed: str | None = None,
) -> CreatureScene:
    geometry = synthesize_geometry(params, size)
    c = geometry.center
    radius = geometry.base_radius
    eye = params.eye_radius

    return CreatureScene(
        parameters=params,
        geometry=geometry,
        palette=build_palette(params),
        glow=Circle(c, c, radius + params.aura_radius * C.AURA_GLOW_SCALE),
        body=Circle(c, c, radius * C.BODY_CIRCLE),
        core=Circle(c, c, params.core_radius),
        eyes=(Circle(c - eye, c - eye / 2, eye / 2), Circle(c + eye, c - eye / 2, eye / 2)),
        label=label or None,
        genome=genome.strip(),
        seed=seed.strip() if seed else None,
    )


def generate_scene(
    genome_hex: str,
    seed_hex: str | None = None,
    level: int = 1,
    stage: int = 0,
    size: float = 96,
    label: str | None = None,
) -> CreatureScene:
    """Build the creature for a genome. Raises MalformedHexError for a bad genome."""
    data = genome_bytes(genome_hex, seed_hex)
    params = derive_parameters(data, level, stage)
    scene = compose_scene(params, size, label, genome=genome_hex, seed=seed_hex)
    logger.debug(
        "Scene: %d genome+seed bytes, variant=%s, %d vertices",
        len(data),
        scene.geometry.ornament,
        len(scene.geometry.vertices),
    )
    return scene
