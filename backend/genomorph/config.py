"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    genomorph_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Rendering
    default_size: int = 96
    max_size: int = 2048

    # Accepted level/stage range for rendering requests
    max_level: int = 10_000
    max_stage: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
