from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class CreateCommentRequest(BaseModel):
    user_id: UUID
    content: str
    parent_comment_id: UUID | None = None


class CommentResponse(BaseModel):
    id: UUID
    post_id: UUID
    user_id: UUID
    content: str
    parent_comment_id: UUID | None
    created_at: datetime

    model_config = {"from_attributes": True}
