from __future__ import annotations

from typing import Protocol

from gearup_service.application.repositories.comment import CommentReader, CommentWriter
from gearup_service.application.repositories.post import PostReader, PostWriter


class UnitOfWork(Protocol):
    posts: PostReader
    posts_w: PostWriter
    comments: CommentReader
    comments_w: CommentWriter

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
