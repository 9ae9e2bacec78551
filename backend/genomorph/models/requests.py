"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from genomorph.config import settings


class CreatureRequest(BaseModel):
    genome: str = Field(default="", description="Genome hex string, optional 0x prefix")
    seed: str | None = Field(default=None, description="Seed hex (usually the object id); malformed seeds are ignored")
    level: int = Field(default=1, ge=0, le=settings.max_level, description="Creature level")
    stage: int = Field(default=0, ge=0, le=settings.max_stage, description="Evolution stage")
    size: float = Field(default=settings.default_size, gt=0, description="Output width/height")
    label: str | None = Field(default=None, description="Optional caption")


class FieldsRequest(BaseModel):
    id: str = Field(..., description="On-chain object id, used as the seed")
    fields: dict[str, Any] = Field(default_factory=dict, description="Object fields as returned by the chain RPC")
    size: float = Field(default=settings.default_size, gt=0, description="Output width/height")
    label: str | None = Field(default=None, description="Optional caption")
