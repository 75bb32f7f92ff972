from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator

import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gearup_service.api.middleware.request_context import RequestContextMiddleware
from gearup_service.api.v1.routers import comments, health, posts
from gearup_service.application.exceptions import (
    CacheError,
    InvalidCursorError,
    NotFoundError,
    ValidationError,
)
from gearup_service.config import settings
from gearup_service.infrastructure.cache.redis_store import RedisCacheStore
from gearup_service.services.cache_service import CacheService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    app.state.redis = aioredis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
    )
    app.state.cache = CacheService(
        RedisCacheStore(app.state.redis, prefix=settings.CACHE_KEY_PREFIX),
        default_ttl=timedelta(seconds=settings.CACHE_DEFAULT_TTL_SECONDS),
    )
    logger.info("Redis connection pool created")

    yield

    await app.state.redis.aclose()
    logger.info("Redis connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="GearUp Listing Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(posts.router)
    app.include_router(comments.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(InvalidCursorError)
    async def _invalid_cursor(_req: Request, exc: InvalidCursorError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})

    @app.exception_handler(CacheError)
    async def _cache(_req: Request, exc: CacheError) -> JSONResponse:
        logger.error("Unhandled cache error: %s", exc.detail)
        return JSONResponse(status_code=500, content={"detail": "Internal cache error"})
