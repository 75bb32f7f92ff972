"""Seed development data: a dealer feed with shared timestamps and a comment thread."""
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone

from gearup_service.domain.entities.comment import Comment
from gearup_service.domain.entities.post import Post
from gearup_service.domain.value_objects.enums import PostVisibility
from gearup_service.infrastructure.db.session import AsyncSessionLocal
from gearup_service.infrastructure.db.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)

POSTS_PER_BATCH = 3


async def seed(batches: int = 5) -> None:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        dealer_id = uuid.uuid4()
        base = datetime.now(timezone.utc).replace(microsecond=0)

        posts: list[Post] = []
        for batch in range(batches):
            # Posts in a batch share created_at so paging must fall back to id.
            ts = base - timedelta(minutes=batch)
            for n in range(POSTS_PER_BATCH):
                post = Post(
                    id=uuid.uuid4(),
                    user_id=dealer_id,
                    caption=f"Listing {batch}-{n}",
                    content="Low mileage, full service history.",
                    visibility=PostVisibility.PUBLIC,
                    car_id=None,
                    created_at=ts,
                    updated_at=ts,
                )
                posts.append(await uow.posts_w.create(post))

        first = posts[0]
        for n in range(5):
            ts = first.created_at + timedelta(seconds=n)
            await uow.comments_w.create(
                Comment(
                    id=uuid.uuid4(),
                    post_id=first.id,
                    user_id=uuid.uuid4(),
                    content=f"Is this still available? ({n})",
                    parent_comment_id=None,
                    is_deleted=False,
                    created_at=ts,
                    updated_at=ts,
                )
            )

        await uow.commit()
        logger.info("Seeded %d posts for dealer %s", len(posts), dealer_id)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
