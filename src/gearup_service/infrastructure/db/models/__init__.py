"""Import all models so Alembic can discover them via Base.metadata."""
from gearup_service.infrastructure.db.models.comment import CommentModel
from gearup_service.infrastructure.db.models.post import PostModel

__all__ = [
    "CommentModel",
    "PostModel",
]
