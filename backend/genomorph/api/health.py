"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from genomorph.engine.registry import get_registry
from genomorph.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        variants=get_registry().count,
    )


@router.get("/ornaments")
async def ornaments() -> dict[str, str]:
    return {str(spec.variant): spec.name for spec in get_registry().all()}
