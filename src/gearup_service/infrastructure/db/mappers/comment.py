from __future__ import annotations

from gearup_service.domain.entities.comment import Comment
from gearup_service.infrastructure.db.models.comment import CommentModel


def model_to_entity(model: CommentModel) -> Comment:
    return Comment(
        id=model.id,
        post_id=model.post_id,
        user_id=model.user_id,
        content=model.content,
        parent_comment_id=model.parent_comment_id,
        is_deleted=model.is_deleted,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Comment) -> CommentModel:
    return CommentModel(
        id=entity.id,
        post_id=entity.post_id,
        user_id=entity.user_id,
        content=entity.content,
        parent_comment_id=entity.parent_comment_id,
        is_deleted=entity.is_deleted,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
