from __future__ import annotations

from datetime import timedelta
from uuid import UUID

from fastapi import APIRouter, Query

from gearup_service.api.deps import CacheDep, UoWDep
from gearup_service.api.v1.schemas.common import CursorPageResponse
from gearup_service.api.v1.schemas.post import CreatePostRequest, PostResponse
from gearup_service.config import settings
from gearup_service.services import post_service

router = APIRouter(prefix="/api/v1", tags=["posts"])


def _to_response(post: object) -> PostResponse:
    return PostResponse.model_validate(post, from_attributes=True)


def _post_ttl() -> timedelta:
    return timedelta(seconds=settings.POST_CACHE_TTL_SECONDS)


@router.get("/posts", response_model=CursorPageResponse[PostResponse])
async def latest_feed(
    uow: UoWDep,
    cursor: str | None = Query(None),
    limit: int = Query(settings.FEED_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> CursorPageResponse[PostResponse]:
    page = await post_service.list_feed(
        cursor, limit, uow, strict_cursor=settings.CURSOR_STRICT,
    )
    return CursorPageResponse[PostResponse].from_page(page, _to_response)


@router.get("/dealers/{dealer_id}/posts", response_model=CursorPageResponse[PostResponse])
async def dealer_posts(
    dealer_id: UUID,
    uow: UoWDep,
    cursor: str | None = Query(None),
    limit: int = Query(settings.FEED_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> CursorPageResponse[PostResponse]:
    page = await post_service.list_dealer_posts(
        dealer_id, cursor, limit, uow, strict_cursor=settings.CURSOR_STRICT,
    )
    return CursorPageResponse[PostResponse].from_page(page, _to_response)


@router.post("/posts", response_model=PostResponse, status_code=201)
async def create_post(
    body: CreatePostRequest,
    uow: UoWDep,
    cache: CacheDep,
) -> PostResponse:
    post = await post_service.create_post(
        body.user_id,
        body.caption,
        body.content,
        body.visibility,
        body.car_id,
        uow,
        cache,
        ttl=_post_ttl(),
    )
    return _to_response(post)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    uow: UoWDep,
    cache: CacheDep,
) -> PostResponse:
    post = await post_service.get_post(post_id, uow, cache, ttl=_post_ttl())
    return _to_response(post)


@router.delete("/posts/{post_id}", status_code=204)
async def delete_post(
    post_id: UUID,
    uow: UoWDep,
    cache: CacheDep,
) -> None:
    await post_service.delete_post(post_id, uow, cache)
