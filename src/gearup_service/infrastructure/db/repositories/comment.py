from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gearup_service.application.pagination.cursor import Cursor
from gearup_service.application.pagination.page import SortDirection
from gearup_service.domain.entities.comment import Comment
from gearup_service.infrastructure.db.mappers import comment as mapper
from gearup_service.infrastructure.db.models.comment import CommentModel
from gearup_service.infrastructure.db.repositories._keyset import apply_keyset


class CommentReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_post(
        self,
        post_id: UUID,
        *,
        after: Cursor | None = None,
        limit: int = 20,
    ) -> list[Comment]:
        stmt = select(CommentModel).where(
            CommentModel.post_id == post_id,
            CommentModel.is_deleted.is_(False),
        )
        stmt = apply_keyset(
            stmt,
            CommentModel.created_at,
            CommentModel.id,
            after=after,
            limit=limit,
            direction=SortDirection.ASC,
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class CommentWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, comment: Comment) -> Comment:
        model = mapper.entity_to_model(comment)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
