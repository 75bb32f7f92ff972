from __future__ import annotations

from typing import Protocol
from uuid import UUID

from gearup_service.application.pagination.cursor import Cursor
from gearup_service.domain.entities.post import Post


class PostReader(Protocol):
    async def get_by_id(self, post_id: UUID) -> Post | None: ...

    async def list_feed(
        self,
        *,
        after: Cursor | None = None,
        limit: int = 10,
    ) -> list[Post]:
        """Public posts strictly after ``after``, newest first."""
        ...

    async def list_by_author(
        self,
        user_id: UUID,
        *,
        after: Cursor | None = None,
        limit: int = 10,
    ) -> list[Post]: ...


class PostWriter(Protocol):
    async def create(self, post: Post) -> Post: ...

    async def delete(self, post_id: UUID) -> bool:
        """Return True if a row was deleted."""
        ...
