"""Genomorph creature-appearance engine."""

from genomorph.engine.decoder import MalformedHexError, decode_hex, genome_bytes
from genomorph.engine.geometry import GeometryScene, synthesize_geometry
from genomorph.engine.palette import PaletteScene, build_palette
from genomorph.engine.parameters import VisualParameters, derive_parameters
from genomorph.engine.scene import CreatureScene, generate_scene

__all__ = [
    "MalformedHexError",
    "decode_hex",
    "genome_bytes",
    "VisualParameters",
    "derive_parameters",
    "GeometryScene",
    "synthesize_geometry",
    "PaletteScene",
    "build_palette",
    "CreatureScene",
    "generate_scene",
]
