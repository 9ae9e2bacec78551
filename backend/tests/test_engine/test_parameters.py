"""Tests for parameter derivation."""

from dataclasses import asdict

import pytest

from genomorph.engine.decoder import decode_hex, genome_bytes
from genomorph.engine.parameters import byte_at, clamp, derive_parameters
from tests.conftest import (
    DEFAULT_CORE_RADIUS,
    DEFAULT_ORGANISM_PARAMS,
    SCENARIO_CORE_RADIUS,
    SCENARIO_GENOME,
    SCENARIO_PARAMS,
    SCENARIO_SEED,
)


def test_byte_at_wraps():
    data = bytes([10, 20, 30])
    assert byte_at(data, 0, 99) == 10
    assert byte_at(data, 4, 99) == 20
    assert byte_at(b"", 4, 99) == 99


def test_clamp():
    assert clamp(3, 4, 12) == 4
    assert clamp(13, 4, 12) == 12
    assert clamp(7.5, 4, 12) == 7.5


def test_scenario_parameters():
    params = derive_parameters(genome_bytes(SCENARIO_GENOME, SCENARIO_SEED), level=1, stage=0)
    fields = asdict(params)
    core = fields.pop("core_radius")
    assert fields == SCENARIO_PARAMS
    assert core == pytest.approx(SCENARIO_CORE_RADIUS)


def test_default_organism():
    params = derive_parameters(b"", level=1, stage=0)
    fields = asdict(params)
    core = fields.pop("core_radius")
    assert fields == DEFAULT_ORGANISM_PARAMS
    assert core == pytest.approx(DEFAULT_CORE_RADIUS)


def test_deterministic():
    data = genome_bytes(SCENARIO_GENOME, SCENARIO_SEED)
    assert derive_parameters(data, 3, 2) == derive_parameters(data, 3, 2)


def test_range_invariants(sample_genomes):
    for data in sample_genomes:
        for level in (0, 1, 5, 30, 100):
            for stage in (0, 1, 2, 7):
                p = derive_parameters(data, level, stage)
                assert 4 <= p.eye_radius <= 12
                assert 10 <= p.core_radius <= 26
                assert 18 <= p.aura_radius <= 42
                assert p.spike_count >= 7
                assert 6 <= p.wobble <= 19
                for hue in (p.hue, p.hue2, p.hue3):
                    assert 0 <= hue < 360
                assert p.variant in (0, 1, 2)


def test_negative_level_and_stage_are_total(sample_genomes):
    for data in sample_genomes:
        p = derive_parameters(data, level=-40, stage=-25)
        assert p.spike_count >= 7
        assert 10 <= p.core_radius <= 26
        assert 0 <= p.hue2 < 360
        assert 0 <= p.hue3 < 360
        assert p.variant in (0, 1, 2)


def test_stage_monotonicity(sample_genomes):
    for data in sample_genomes:
        for stage in range(5):
            a = derive_parameters(data, 2, stage)
            b = derive_parameters(data, 2, stage + 1)
            assert b.spike_count == a.spike_count + 1
            assert (b.hue3 - a.hue3) % 360 == 19
            assert b.twist == a.twist + 3
            assert b.hue == a.hue
            assert b.hue2 == a.hue2


def test_level_rotates_secondary_hue(sample_genomes):
    for data in sample_genomes:
        a = derive_parameters(data, 4, 0)
        b = derive_parameters(data, 5, 0)
        assert (b.hue2 - a.hue2) % 360 == 7
        assert b.core_radius >= a.core_radius
        assert b.hue == a.hue


def test_single_byte_change_changes_parameters():
    base_bytes = decode_hex(SCENARIO_GENOME)
    base = derive_parameters(base_bytes + decode_hex(SCENARIO_SEED), 1, 0)
    for i in range(len(base_bytes)):
        mutated = bytearray(base_bytes)
        mutated[i] ^= 0x01
        changed = derive_parameters(bytes(mutated) + decode_hex(SCENARIO_SEED), 1, 0)
        assert changed != base


def test_seed_decorrelates_identical_genomes():
    a = derive_parameters(genome_bytes(SCENARIO_GENOME, "0x0001"), 1, 0)
    b = derive_parameters(genome_bytes(SCENARIO_GENOME, "0xf00d"), 1, 0)
    assert a != b


def test_huge_level_saturates_core_radius():
    assert derive_parameters(b"", 10**400, 0).core_radius == 26
    assert derive_parameters(b"", -(10**400), 0).core_radius == 10


def test_huge_stage_still_derives():
    params = derive_parameters(b"", 1, 10**10)
    assert params.spike_count > 10**10
    assert 0 <= params.hue3 < 360
