from __future__ import annotations

from typing import Protocol
from uuid import UUID

from gearup_service.application.pagination.cursor import Cursor
from gearup_service.domain.entities.comment import Comment


class CommentReader(Protocol):
    async def list_for_post(
        self,
        post_id: UUID,
        *,
        after: Cursor | None = None,
        limit: int = 20,
    ) -> list[Comment]:
        """Live comments strictly after ``after``, oldest first."""
        ...


class CommentWriter(Protocol):
    async def create(self, comment: Comment) -> Comment: ...
