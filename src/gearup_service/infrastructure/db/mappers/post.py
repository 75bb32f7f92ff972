from __future__ import annotations

from gearup_service.domain.entities.post import Post
from gearup_service.domain.value_objects.enums import PostVisibility
from gearup_service.infrastructure.db.models.post import PostModel


def model_to_entity(model: PostModel) -> Post:
    return Post(
        id=model.id,
        user_id=model.user_id,
        caption=model.caption,
        content=model.content,
        visibility=PostVisibility(model.visibility),
        car_id=model.car_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Post) -> PostModel:
    return PostModel(
        id=entity.id,
        user_id=entity.user_id,
        caption=entity.caption,
        content=entity.content,
        visibility=entity.visibility.value,
        car_id=entity.car_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
