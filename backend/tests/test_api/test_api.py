"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from genomorph.config import settings
from genomorph.engine.scene import generate_scene
from genomorph.main import app
from genomorph.models.requests import CreatureRequest, FieldsRequest
from genomorph.svg.serializer import scene_to_svg
from tests.conftest import SCENARIO_GENOME, SCENARIO_PARAMS, SCENARIO_SEED


client = TestClient(app)

_SCENARIO_BODY = {"genome": SCENARIO_GENOME, "seed": SCENARIO_SEED, "level": 1, "stage": 0, "size": 96}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["variants"] == 3


def test_ornaments():
    response = client.get("/api/ornaments")
    assert response.json() == {"0": "tentacles", "1": "shell", "2": "ears_and_tail"}


def test_scene():
    response = client.post("/api/creature/scene", json=_SCENARIO_BODY)
    assert response.status_code == 200
    data = response.json()
    for key, value in SCENARIO_PARAMS.items():
        assert data["parameters"][key] == value
    assert data["ornament"] == "tentacles"
    assert data["ornament_count"] == 6
    assert len(data["vertices"]) == 15
    assert data["palette"]["body"] == "hsl(346 60% 45%)"
    assert data["silhouette_area"] > 0


def test_scene_defaults_to_default_organism():
    response = client.post("/api/creature/scene", json={})
    assert response.status_code == 200
    assert response.json()["ornament"] == "shell"


def test_svg():
    response = client.post("/api/creature/svg", json={**_SCENARIO_BODY, "label": "Lv 1"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.startswith("<svg")
    assert "Lv 1" in response.text


def test_malformed_genome_is_422():
    response = client.post("/api/creature/svg", json={"genome": "0x123"})
    assert response.status_code == 422
    assert "Malformed hex" in response.json()["detail"]


def test_malformed_seed_still_renders():
    response = client.post("/api/creature/svg", json={"genome": SCENARIO_GENOME, "seed": "0xabc"})
    assert response.status_code == 200


def test_size_bounds():
    assert client.post("/api/creature/svg", json={"size": 0}).status_code == 422
    assert client.post("/api/creature/svg", json={"size": 100000}).status_code == 422


def test_fields_matches_direct_render():
    response = client.post(
        "/api/creature/fields",
        json={
            "id": SCENARIO_SEED,
            "fields": {"genome": {"vec": [1, 2, 3]}, "level": "1", "stage": "0"},
        },
    )
    assert response.status_code == 200
    expected = scene_to_svg(
        generate_scene(SCENARIO_GENOME, SCENARIO_SEED, level=1, stage=0, size=96),
    )
    assert response.text == expected


def test_fields_without_genome_uses_seed_only():
    response = client.post("/api/creature/fields", json={"id": "0x00ff", "fields": {}})
    assert response.status_code == 200
    assert response.text == scene_to_svg(generate_scene("0x", "0x00ff"))


def test_level_and_stage_bounds():
    for body in ({"stage": 10**10}, {"level": 10**400}, {"level": -1}, {"stage": -1}):
        assert client.post("/api/creature/svg", json=body).status_code == 422
    assert client.post("/api/creature/scene", json={"level": 10_000, "stage": 100}).status_code == 200


def test_fields_out_of_range_is_422():
    for fields in ({"stage": "10000000000"}, {"level": "-3"}):
        response = client.post("/api/creature/fields", json={"id": "0x00ff", "fields": fields})
        assert response.status_code == 422
        assert "must be within" in response.json()["detail"]


def test_fields_unparseable_level_uses_default():
    response = client.post("/api/creature/fields", json={"id": "0x00ff", "fields": {"level": "abc"}})
    assert response.status_code == 200
    assert response.text == scene_to_svg(generate_scene("0x", "0x00ff", level=1))


def test_different_genomes_get_distinct_gradient_ids():
    a = client.post("/api/creature/svg", json={"genome": "0x01"}).text
    b = client.post("/api/creature/svg", json={"genome": "0x02"}).text
    assert 'id="grad-0x01-96"' in a
    assert 'id="grad-0x02-96"' in b


def test_request_defaults_follow_settings():
    assert CreatureRequest().size == settings.default_size
    assert FieldsRequest(id="0x01").size == settings.default_size
