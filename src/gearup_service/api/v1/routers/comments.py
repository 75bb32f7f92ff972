from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query

from gearup_service.api.deps import UoWDep
from gearup_service.api.v1.schemas.comment import CommentResponse, CreateCommentRequest
from gearup_service.api.v1.schemas.common import CursorPageResponse
from gearup_service.config import settings
from gearup_service.services import comment_service

router = APIRouter(prefix="/api/v1/posts", tags=["comments"])


def _to_response(comment: object) -> CommentResponse:
    return CommentResponse.model_validate(comment, from_attributes=True)


@router.get("/{post_id}/comments", response_model=CursorPageResponse[CommentResponse])
async def list_comments(
    post_id: UUID,
    uow: UoWDep,
    cursor: str | None = Query(None),
    limit: int = Query(settings.COMMENTS_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> CursorPageResponse[CommentResponse]:
    page = await comment_service.list_comments(
        post_id, cursor, limit, uow, strict_cursor=settings.CURSOR_STRICT,
    )
    return CursorPageResponse[CommentResponse].from_page(page, _to_response)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    post_id: UUID,
    body: CreateCommentRequest,
    uow: UoWDep,
) -> CommentResponse:
    comment = await comment_service.add_comment(
        post_id, body.user_id, body.content, body.parent_comment_id, uow,
    )
    return _to_response(comment)
