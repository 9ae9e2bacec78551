"""Genome bytes + level + stage → visual parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from genomorph.engine import constants as C

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualParameters:
    """Every number the geometry and palette stages need."""

    hue: int
    hue2: int
    hue3: int
    eye_radius: int
    core_radius: float
    spike_count: int
    twist: int
    wobble: int
    aura_radius: int
    variant: int
    # b7, reused to stretch tentacle control points
    ornament_byte: int


def byte_at(data: bytes, index: int, fallback: int) -> int:
    """``data[index]`` with wraparound; ``fallback`` when there is no data."""
    if not data:
        return fallback
    return data[index % len(data)]


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def derive_parameters(data: bytes, level: int = 1, stage: int = 0) -> VisualParameters:
    """Derive the creature's visual parameters.

    Total over all inputs: every field is reduced with modulo or clamp, and
    Python's floor modulo keeps hues and the variant non-negative for
    negative level/stage.
    """
    b = [byte_at(data, i, fb) for i, fb in enumerate(C.FALLBACK_BYTES)]

    palette_shift = (b[9] % C.PALETTE_SHIFT_SPAN) - C.PALETTE_SHIFT_OFFSET
    hue = (b[0] * C.HUE_BYTE_SCALE + palette_shift) % C.HUE_CIRCLE
    hue2 = (hue + C.SECONDARY_HUE_OFFSET + b[1] + level * C.HUE_PER_LEVEL) % C.HUE_CIRCLE
    hue3 = (hue + C.TERTIARY_HUE_OFFSET + b[2] + stage * C.HUE_PER_STAGE) % C.HUE_CIRCLE

    eye = clamp((b[3] % C.EYE_MOD) + C.EYE_OFFSET, C.EYE_MIN, C.EYE_MAX)
    # Past ±CORE_LEVEL_SPAN the clamp below saturates anyway; bounding first
    # keeps huge ints out of float arithmetic.
    core_level = clamp(level, -C.CORE_LEVEL_SPAN, C.CORE_LEVEL_SPAN)
    core = clamp(
        (b[4] % C.CORE_MOD) + C.CORE_OFFSET + core_level * C.CORE_PER_LEVEL,
        C.CORE_MIN,
        C.CORE_MAX,
    )
    # Floor only matters for negative stages.
    spikes = max(C.MIN_SPIKES, C.MIN_SPIKES + (b[5] % C.SPIKE_MOD) + stage)
    twist = (b[6] % C.TWIST_MOD) - C.TWIST_OFFSET + stage * C.TWIST_PER_STAGE
    wobble = (b[7] % C.WOBBLE_MOD) + C.WOBBLE_OFFSET
    aura = clamp(C.AURA_OFFSET + (b[8] % C.AURA_MOD), C.AURA_MIN, C.AURA_MAX)
    variant = (b[10] + level + stage) % C.VARIANT_COUNT

    params = VisualParameters(
        hue=hue,
        hue2=hue2,
        hue3=hue3,
        eye_radius=int(eye),
        core_radius=float(core),
        spike_count=spikes,
        twist=twist,
        wobble=wobble,
        aura_radius=int(aura),
        variant=variant,
        ornament_byte=b[7],
    )
    logger.debug("Derived parameters (level=%d, stage=%d): %s", level, stage, params)
    return params
