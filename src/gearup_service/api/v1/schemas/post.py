from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from gearup_service.domain.value_objects.enums import PostVisibility


class CreatePostRequest(BaseModel):
    user_id: UUID
    caption: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    visibility: PostVisibility = PostVisibility.PUBLIC
    car_id: UUID | None = None


class PostResponse(BaseModel):
    id: UUID
    user_id: UUID
    caption: str
    content: str
    visibility: PostVisibility
    car_id: UUID | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
