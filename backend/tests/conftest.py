"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Reference creature: a minted genome plus an 8-byte object id as seed.
SCENARIO_GENOME = "0x010203"
SCENARIO_SEED = "0xabc1234567890def"

# Values derived by hand from the byte slots:
# bytes = 01 02 03 ab c1 23 45 67 89 0d ef
SCENARIO_PARAMS = {
    "hue": 346,
    "hue2": 85,
    "hue3": 169,
    "eye_radius": 5,
    "spike_count": 15,
    "twist": -6,
    "wobble": 11,
    "aura_radius": 35,
    "variant": 0,
    "ornament_byte": 103,
}
SCENARIO_CORE_RADIUS = 23.6

# Empty genome + empty seed at level 1, stage 0: every slot uses its fallback.
DEFAULT_ORGANISM_PARAMS = {
    "hue": 240,
    "hue2": 117,
    "hue3": 260,
    "eye_radius": 4,
    "spike_count": 13,
    "twist": -15,
    "wobble": 18,
    "aura_radius": 18,
    "variant": 1,
    "ornament_byte": 40,
}
DEFAULT_CORE_RADIUS = 14.6

# Genomes that land on each ornament variant at level 1, stage 0
# (variant = (b10 + 1) % 3 where b10 wraps onto a 1-byte genome).
VARIANT_GENOMES = {0: "0x02", 1: "0x00", 2: "0x01"}


@pytest.fixture
def scenario_genome() -> str:
    return SCENARIO_GENOME


@pytest.fixture
def scenario_seed() -> str:
    return SCENARIO_SEED


@pytest.fixture
def sample_genomes() -> list[bytes]:
    """A spread of genome byte strings of different lengths and contents."""
    out = [b"", b"\x00", b"\xff", bytes(range(11)), bytes(range(255, 200, -1))]
    for i in range(0, 256, 7):
        out.append(bytes([i, (i * 31) % 256, (i * 97) % 256, 255 - i]))
    return out
