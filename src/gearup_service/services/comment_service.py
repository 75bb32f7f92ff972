from __future__ import annotations

import uuid
from datetime import datetime, timezone

from gearup_service.application.exceptions import NotFoundError, ValidationError
from gearup_service.application.pagination.cursor import Cursor
from gearup_service.application.pagination.page import CursorPage
from gearup_service.application.pagination.paginator import paginate, resolve_cursor
from gearup_service.application.uow import UnitOfWork
from gearup_service.domain.entities.comment import Comment


def comment_position(comment: Comment) -> Cursor:
    return Cursor(created_at=comment.created_at, id=comment.id)


async def list_comments(
    post_id: uuid.UUID,
    cursor: str | None,
    limit: int,
    uow: UnitOfWork,
    *,
    strict_cursor: bool = False,
) -> CursorPage[Comment]:
    """Comments on a post in thread order (oldest first)."""
    if await uow.posts.get_by_id(post_id) is None:
        raise NotFoundError("Post not found")

    after = resolve_cursor(cursor, strict=strict_cursor)
    return await paginate(
        lambda pos, n: uow.comments.list_for_post(post_id, after=pos, limit=n),
        after,
        limit,
        comment_position,
    )


async def add_comment(
    post_id: uuid.UUID,
    user_id: uuid.UUID,
    content: str,
    parent_comment_id: uuid.UUID | None,
    uow: UnitOfWork,
) -> Comment:
    if not content or not content.strip():
        raise ValidationError("Content cannot be empty")
    if await uow.posts.get_by_id(post_id) is None:
        raise NotFoundError("Post not found")

    now = datetime.now(timezone.utc)
    comment = Comment(
        id=uuid.uuid4(),
        post_id=post_id,
        user_id=user_id,
        content=content,
        parent_comment_id=parent_comment_id,
        is_deleted=False,
        created_at=now,
        updated_at=now,
    )
    comment = await uow.comments_w.create(comment)
    await uow.commit()
    return comment
