"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import pytest

from gearup_service.application.pagination.cursor import Cursor, as_utc
from gearup_service.application.pagination.page import SortDirection
from gearup_service.application.pagination.paginator import is_after
from gearup_service.domain.entities.comment import Comment
from gearup_service.domain.entities.post import Post
from gearup_service.domain.value_objects.enums import PostVisibility
from gearup_service.services.cache_service import CacheService

BASE_TS = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_post(
    *,
    created_at: datetime | None = None,
    post_id: UUID | None = None,
    user_id: UUID | None = None,
    visibility: PostVisibility = PostVisibility.PUBLIC,
    caption: str = "For sale",
) -> Post:
    ts = created_at or datetime.now(timezone.utc)
    return Post(
        id=post_id or uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        caption=caption,
        content="2019 hatchback, one owner",
        visibility=visibility,
        car_id=None,
        created_at=ts,
        updated_at=ts,
    )


def make_comment(
    post_id: UUID,
    *,
    created_at: datetime | None = None,
    is_deleted: bool = False,
) -> Comment:
    ts = created_at or datetime.now(timezone.utc)
    return Comment(
        id=uuid.uuid4(),
        post_id=post_id,
        user_id=uuid.uuid4(),
        content="Still available?",
        parent_comment_id=None,
        is_deleted=is_deleted,
        created_at=ts,
        updated_at=ts,
    )


def timeline(n: int, *, step: timedelta = timedelta(minutes=1)) -> list[Post]:
    """``n`` public posts, the i-th created at BASE_TS + i*step."""
    return [make_post(created_at=BASE_TS + i * step) for i in range(n)]


def _keyset_slice(
    items: list[Any],
    after: Cursor | None,
    limit: int,
    direction: SortDirection,
) -> list[Any]:
    ordered = sorted(
        items,
        key=lambda i: (as_utc(i.created_at), i.id),
        reverse=direction is SortDirection.DESC,
    )
    if after is not None:
        ordered = [
            i for i in ordered
            if is_after(Cursor(created_at=i.created_at, id=i.id), after, direction)
        ]
    return ordered[:limit]


@dataclass
class FakePostReader:
    _posts: list[Post] = field(default_factory=list)
    get_calls: int = 0

    async def get_by_id(self, post_id: UUID) -> Post | None:
        self.get_calls += 1
        return next((p for p in self._posts if p.id == post_id), None)

    async def list_feed(self, *, after: Cursor | None = None, limit: int = 10) -> list[Post]:
        public = [p for p in self._posts if p.visibility == PostVisibility.PUBLIC]
        return _keyset_slice(public, after, limit, SortDirection.DESC)

    async def list_by_author(
        self, user_id: UUID, *, after: Cursor | None = None, limit: int = 10,
    ) -> list[Post]:
        own = [p for p in self._posts if p.user_id == user_id]
        return _keyset_slice(own, after, limit, SortDirection.DESC)


@dataclass
class FakePostWriter:
    _reader: FakePostReader

    async def create(self, post: Post) -> Post:
        self._reader._posts.append(post)
        return post

    async def delete(self, post_id: UUID) -> bool:
        before = len(self._reader._posts)
        self._reader._posts = [p for p in self._reader._posts if p.id != post_id]
        return len(self._reader._posts) < before


@dataclass
class FakeCommentReader:
    _comments: list[Comment] = field(default_factory=list)

    async def list_for_post(
        self, post_id: UUID, *, after: Cursor | None = None, limit: int = 20,
    ) -> list[Comment]:
        live = [c for c in self._comments if c.post_id == post_id and not c.is_deleted]
        return _keyset_slice(live, after, limit, SortDirection.ASC)


@dataclass
class FakeCommentWriter:
    _reader: FakeCommentReader

    async def create(self, comment: Comment) -> Comment:
        self._reader._comments.append(comment)
        return comment


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    posts: FakePostReader = field(default_factory=FakePostReader)
    posts_w: FakePostWriter | None = None
    comments: FakeCommentReader = field(default_factory=FakeCommentReader)
    comments_w: FakeCommentWriter | None = None
    _committed: bool = False

    def __post_init__(self) -> None:
        if self.posts_w is None:
            self.posts_w = FakePostWriter(self.posts)
        if self.comments_w is None:
            self.comments_w = FakeCommentWriter(self.comments)

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        pass


@dataclass
class FakeCacheStore:
    """Dict-backed CacheStore that records the TTL of every write."""
    _data: dict[str, str] = field(default_factory=dict)
    set_calls: list[tuple[str, str, timedelta]] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    async def get_string(self, key: str) -> str | None:
        return self._data.get(key)

    async def set_string(self, key: str, value: str, *, ttl: timedelta) -> None:
        self.set_calls.append((key, value, ttl))
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self.removed.append(key)
        self._data.pop(key, None)


@pytest.fixture
def cache_store() -> FakeCacheStore:
    return FakeCacheStore()


@pytest.fixture
def cache(cache_store: FakeCacheStore) -> CacheService:
    return CacheService(cache_store)
