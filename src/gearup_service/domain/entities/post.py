from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from gearup_service.domain.value_objects.enums import PostVisibility


@dataclass(frozen=True, slots=True)
class Post:
    id: UUID
    user_id: UUID
    caption: str
    content: str
    visibility: PostVisibility
    car_id: UUID | None
    created_at: datetime
    updated_at: datetime
