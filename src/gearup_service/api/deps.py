"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request

from gearup_service.infrastructure.db.session import AsyncSessionLocal
from gearup_service.infrastructure.db.uow import SqlAlchemyUoW
from gearup_service.services.cache_service import CacheService


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        try:
            yield uow
        finally:
            await session.close()


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def get_cache(request: Request) -> CacheService:
    """Shared CacheService built during application startup."""
    return request.app.state.cache


CacheDep = Annotated[CacheService, Depends(get_cache)]
