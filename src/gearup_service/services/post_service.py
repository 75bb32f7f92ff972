from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone

from gearup_service.application.exceptions import CacheDeserializationError, NotFoundError
from gearup_service.application.pagination.cursor import Cursor
from gearup_service.application.pagination.page import CursorPage
from gearup_service.application.pagination.paginator import paginate, resolve_cursor
from gearup_service.application.uow import UnitOfWork
from gearup_service.domain.entities.post import Post
from gearup_service.domain.value_objects.enums import PostVisibility
from gearup_service.services.cache_service import CacheService

logger = logging.getLogger(__name__)


def post_cache_key(post_id: uuid.UUID) -> str:
    return f"post:{post_id}"


def post_position(post: Post) -> Cursor:
    return Cursor(created_at=post.created_at, id=post.id)


async def list_feed(
    cursor: str | None,
    limit: int,
    uow: UnitOfWork,
    *,
    strict_cursor: bool = False,
) -> CursorPage[Post]:
    """Public posts, newest first."""
    after = resolve_cursor(cursor, strict=strict_cursor)
    return await paginate(
        lambda pos, n: uow.posts.list_feed(after=pos, limit=n),
        after,
        limit,
        post_position,
    )


async def list_dealer_posts(
    dealer_id: uuid.UUID,
    cursor: str | None,
    limit: int,
    uow: UnitOfWork,
    *,
    strict_cursor: bool = False,
) -> CursorPage[Post]:
    after = resolve_cursor(cursor, strict=strict_cursor)
    return await paginate(
        lambda pos, n: uow.posts.list_by_author(dealer_id, after=pos, limit=n),
        after,
        limit,
        post_position,
    )


async def get_post(
    post_id: uuid.UUID,
    uow: UnitOfWork,
    cache: CacheService,
    *,
    ttl: timedelta | None = None,
) -> Post:
    """Read-through lookup: cache first, then the database."""
    key = post_cache_key(post_id)
    try:
        post = await cache.get_or_set(
            key, Post, lambda: uow.posts.get_by_id(post_id), ttl,
        )
    except CacheDeserializationError:
        logger.warning("Evicting malformed cache entry %s", key, exc_info=True)
        await cache.remove(key)
        post = await uow.posts.get_by_id(post_id)

    if post is None:
        raise NotFoundError("Post not found")
    return post


async def create_post(
    user_id: uuid.UUID,
    caption: str,
    content: str,
    visibility: PostVisibility,
    car_id: uuid.UUID | None,
    uow: UnitOfWork,
    cache: CacheService,
    *,
    ttl: timedelta | None = None,
) -> Post:
    now = datetime.now(timezone.utc)
    post = Post(
        id=uuid.uuid4(),
        user_id=user_id,
        caption=caption,
        content=content,
        visibility=visibility,
        car_id=car_id,
        created_at=now,
        updated_at=now,
    )
    post = await uow.posts_w.create(post)
    await uow.commit()

    await cache.set(post_cache_key(post.id), post, ttl)
    logger.info("Post %s created by user %s", post.id, user_id)
    return post


async def delete_post(
    post_id: uuid.UUID,
    uow: UnitOfWork,
    cache: CacheService,
) -> None:
    deleted = await uow.posts_w.delete(post_id)
    if not deleted:
        raise NotFoundError("Post not found")
    await uow.commit()
    await cache.remove(post_cache_key(post_id))
