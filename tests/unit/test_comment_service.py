from __future__ import annotations

import uuid
from datetime import timedelta

import pytest

from gearup_service.application.exceptions import NotFoundError, ValidationError
from gearup_service.services import comment_service
from tests.conftest import BASE_TS, FakeUoW, make_comment, make_post


@pytest.fixture
def uow_with_thread():
    uow = FakeUoW()
    post = make_post()
    uow.posts._posts.append(post)
    comments = [
        make_comment(post.id, created_at=BASE_TS + timedelta(seconds=s)) for s in range(4)
    ]
    uow.comments._comments.extend(comments)
    return uow, post, comments


@pytest.mark.asyncio
async def test_comments_page_oldest_first(uow_with_thread):
    uow, post, comments = uow_with_thread

    first = await comment_service.list_comments(post.id, None, 3, uow)
    rest = await comment_service.list_comments(post.id, first.next_cursor, 3, uow)

    assert first.items == comments[:3]
    assert first.has_more is True
    assert rest.items == comments[3:]
    assert rest.next_cursor is None


@pytest.mark.asyncio
async def test_deleted_comments_are_hidden(uow_with_thread):
    uow, post, comments = uow_with_thread
    uow.comments._comments.append(make_comment(post.id, is_deleted=True))

    page = await comment_service.list_comments(post.id, None, 10, uow)

    assert page.items == comments


@pytest.mark.asyncio
async def test_comments_for_unknown_post():
    with pytest.raises(NotFoundError):
        await comment_service.list_comments(uuid.uuid4(), None, 10, FakeUoW())


@pytest.mark.asyncio
async def test_add_comment(uow_with_thread):
    uow, post, _ = uow_with_thread
    author = uuid.uuid4()

    comment = await comment_service.add_comment(post.id, author, "Price?", None, uow)

    assert comment.post_id == post.id
    assert comment.user_id == author
    assert uow._committed is True


@pytest.mark.asyncio
async def test_add_blank_comment_rejected(uow_with_thread):
    uow, post, _ = uow_with_thread

    with pytest.raises(ValidationError):
        await comment_service.add_comment(post.id, uuid.uuid4(), "   ", None, uow)
    assert uow._committed is False
