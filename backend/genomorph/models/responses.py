"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    variants: int = 0


class ParametersModel(BaseModel):
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
    ornament_byte: int


class SceneResponse(BaseModel):
    parameters: ParametersModel
    ornament: str
    ornament_count: int = 0
    vertices: list[tuple[float, float]] = Field(default_factory=list)
    palette: dict[str, str] = Field(default_factory=dict)
    silhouette_area: float = 0.0
    label: str | None = None
