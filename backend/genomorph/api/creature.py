"""POST /api/creature/* — creature scene, SVG and PNG rendering."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from genomorph.config import Settings
from genomorph.dependencies import get_settings
from genomorph.engine.decoder import genome_hex_from_fields
from genomorph.engine.scene import CreatureScene, generate_scene
from genomorph.models.requests import CreatureRequest, FieldsRequest
from genomorph.models.responses import ParametersModel, SceneResponse
from genomorph.svg.serializer import scene_to_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/creature")

_SVG_MEDIA_TYPE = "image/svg+xml"


def _check_size(size: float, settings: Settings) -> None:
    if size > settings.max_size:
        raise HTTPException(status_code=422, detail=f"size must be <= {settings.max_size}")


def _scene(req: CreatureRequest, settings: Settings) -> CreatureScene:
    _check_size(req.size, settings)
    return generate_scene(
        req.genome,
        seed_hex=req.seed,
        level=req.level,
        stage=req.stage,
        size=req.size,
        label=req.label,
    )


def _int_field(fields: dict[str, Any], name: str, default: int, upper: int) -> int:
    """Chain RPCs serialize u64 fields as strings. Out-of-range values are rejected."""
    raw = fields.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if not 0 <= value <= upper:
        raise HTTPException(status_code=422, detail=f"{name} must be within [0, {upper}]")
    return value


@router.post("/scene", response_model=SceneResponse)
async def creature_scene(
    req: CreatureRequest, settings: Settings = Depends(get_settings)
) -> SceneResponse:
    scene = _scene(req, settings)
    palette = scene.palette
    return SceneResponse(
        parameters=ParametersModel(**asdict(scene.parameters)),
        ornament=scene.geometry.ornament,
        ornament_count=len(scene.geometry.ornaments),
        vertices=list(scene.geometry.vertices),
        palette={
            "highlight": palette.highlight.css(),
            "body": palette.body.css(),
            "shadow": palette.shadow.css(),
        },
        silhouette_area=round(scene.geometry.silhouette_area, 3),
        label=scene.label,
    )


@router.post("/svg")
async def creature_svg(req: CreatureRequest, settings: Settings = Depends(get_settings)) -> Response:
    scene = _scene(req, settings)
    return Response(content=scene_to_svg(scene), media_type=_SVG_MEDIA_TYPE)


@router.post("/png")
async def creature_png(req: CreatureRequest, settings: Settings = Depends(get_settings)) -> Response:
    from genomorph.svg.rasterizer import render_png

    scene = _scene(req, settings)
    png = render_png(scene_to_svg(scene), width=round(req.size))
    return Response(content=png, media_type="image/png")


@router.post("/fields")
async def creature_from_fields(
    req: FieldsRequest, settings: Settings = Depends(get_settings)
) -> Response:
    """Render straight from on-chain object fields, the object id acting as seed."""
    _check_size(req.size, settings)
    genome = genome_hex_from_fields(req.fields) or "0x"
    scene = generate_scene(
        genome,
        seed_hex=req.id,
        level=_int_field(req.fields, "level", 1, settings.max_level),
        stage=_int_field(req.fields, "stage", 0, settings.max_stage),
        size=req.size,
        label=req.label,
    )
    logger.debug("Rendered object %s (genome %s)", req.id, genome)
    return Response(content=scene_to_svg(scene), media_type=_SVG_MEDIA_TYPE)
