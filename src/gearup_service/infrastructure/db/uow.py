from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from gearup_service.infrastructure.db.repositories.comment import (
    CommentReaderRepo,
    CommentWriterRepo,
)
from gearup_service.infrastructure.db.repositories.post import (
    PostReaderRepo,
    PostWriterRepo,
)


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.posts = PostReaderRepo(session)
        self.posts_w = PostWriterRepo(session)
        self.comments = CommentReaderRepo(session)
        self.comments_w = CommentWriterRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
