"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from genomorph.config import settings
from genomorph.engine.decoder import MalformedHexError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.genomorph_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _malformed_hex_handler(request: Request, exc: MalformedHexError) -> JSONResponse:
    logger.info("Rejected genome on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Genomorph",
        description="Deterministic creature art from on-chain genomes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MalformedHexError, _malformed_hex_handler)

    from genomorph.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
