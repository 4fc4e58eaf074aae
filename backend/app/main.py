"""
Split Planner API
=================
Application factory for the planner's HTTP surface. ``app`` is the
instance uvicorn serves (``uvicorn app.main:app``); tests build their own
through ``create_app`` when they need different settings.

Only this module reads Settings. The planner services never see them.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.routers import split_planner

logger = logging.getLogger(__name__)

SERVICE_NAME = "split-planner-api"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Root handler plus the configured level. Safe to call more than once."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level.upper())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    public_docs = settings.environment != "production"
    application = FastAPI(
        title="Split Planner API",
        description="Builds a Sunday..Saturday training template from a user's "
        "frequency, experience, session length and weekly sports.",
        version="0.1.0",
        docs_url="/api/docs" if public_docs else None,
        redoc_url="/api/redoc" if public_docs else None,
        openapi_url="/api/openapi.json" if public_docs else None,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.debug("%s %s -> %d", request.method, request.url.path, response.status_code)
        return response

    @application.get("/api/v1/health")
    async def health_check() -> dict:
        return {"status": "ok", "service": SERVICE_NAME}

    application.include_router(split_planner.router)

    logger.info(
        "Split planner API ready (environment=%s, docs=%s)",
        settings.environment, "on" if public_docs else "off",
    )
    return application


app = create_app()
