from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gearup_service.application.pagination.cursor import Cursor
from gearup_service.domain.entities.post import Post
from gearup_service.domain.value_objects.enums import PostVisibility
from gearup_service.infrastructure.db.mappers import post as mapper
from gearup_service.infrastructure.db.models.post import PostModel
from gearup_service.infrastructure.db.repositories._keyset import apply_keyset


class PostReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, post_id: UUID) -> Post | None:
        result = await self._session.get(PostModel, post_id)
        return mapper.model_to_entity(result) if result else None

    async def list_feed(
        self,
        *,
        after: Cursor | None = None,
        limit: int = 10,
    ) -> list[Post]:
        stmt = select(PostModel).where(
            PostModel.visibility == PostVisibility.PUBLIC.value,
        )
        stmt = apply_keyset(
            stmt, PostModel.created_at, PostModel.id, after=after, limit=limit,
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def list_by_author(
        self,
        user_id: UUID,
        *,
        after: Cursor | None = None,
        limit: int = 10,
    ) -> list[Post]:
        stmt = select(PostModel).where(PostModel.user_id == user_id)
        stmt = apply_keyset(
            stmt, PostModel.created_at, PostModel.id, after=after, limit=limit,
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class PostWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, post: Post) -> Post:
        model = mapper.entity_to_model(post)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def delete(self, post_id: UUID) -> bool:
        stmt = delete(PostModel).where(PostModel.id == post_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0
