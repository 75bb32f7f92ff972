from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Comment:
    id: UUID
    post_id: UUID
    user_id: UUID
    content: str
    parent_comment_id: UUID | None
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
