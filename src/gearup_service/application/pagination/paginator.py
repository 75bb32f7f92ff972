"""Keyset pagination over (created_at, id) ordered collections.

Repositories fetch rows strictly after a position; this module turns
``limit + 1`` rows into a page and the cursor for the following one.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable, Sequence, TypeVar

from gearup_service.application.exceptions import ValidationError
from gearup_service.application.pagination.cursor import (
    Cursor,
    as_utc,
    decode_cursor,
    encode_cursor,
    try_decode_cursor,
)
from gearup_service.application.pagination.page import CursorPage, SortDirection

logger = logging.getLogger(__name__)

T = TypeVar("T")

PositionOf = Callable[[T], Cursor]
FetchAfter = Callable[[Cursor | None, int], Awaitable[Sequence[T]]]


def resolve_cursor(token: str | None, *, strict: bool = False) -> Cursor | None:
    """Turn a client token into a position.

    A missing token means the first page. A malformed one also means the
    first page unless ``strict`` is set, in which case InvalidCursorError
    propagates.
    """
    if not token:
        return None
    if strict:
        return decode_cursor(token)
    cursor = try_decode_cursor(token)
    if cursor is None:
        logger.info("Ignoring undecodable cursor, serving first page")
    return cursor


def is_after(position: Cursor, cursor: Cursor, direction: SortDirection) -> bool:
    """Compound (created_at, id) comparison matching the SQL keyset predicate."""
    key = (as_utc(position.created_at), position.id)
    bound = (as_utc(cursor.created_at), cursor.id)
    if direction is SortDirection.DESC:
        return key < bound
    return key > bound


def build_page(
    rows: Sequence[T],
    page_size: int,
    position: PositionOf[T],
) -> CursorPage[T]:
    """Package up to ``page_size + 1`` fetched rows into a page."""
    if len(rows) <= page_size:
        return CursorPage(items=list(rows), next_cursor=None, has_more=False)

    items = list(rows[:page_size])
    return CursorPage(
        items=items,
        next_cursor=encode_cursor(position(items[-1])),
        has_more=True,
    )


async def paginate(
    fetch: FetchAfter[T],
    cursor: Cursor | None,
    page_size: int,
    position: PositionOf[T],
) -> CursorPage[T]:
    if page_size < 1:
        raise ValidationError("page size must be at least 1")
    rows = await fetch(cursor, page_size + 1)
    return build_page(rows, page_size, position)


def paginate_sequence(
    items: Iterable[T],
    cursor: Cursor | None,
    page_size: int,
    position: PositionOf[T],
    *,
    direction: SortDirection = SortDirection.DESC,
) -> CursorPage[T]:
    """Keyset-paginate an in-memory collection."""
    if page_size < 1:
        raise ValidationError("page size must be at least 1")

    def sort_key(item: T) -> tuple:
        pos = position(item)
        return (as_utc(pos.created_at), pos.id)

    ordered = sorted(items, key=sort_key, reverse=direction is SortDirection.DESC)
    if cursor is not None:
        ordered = [i for i in ordered if is_after(position(i), cursor, direction)]
    return build_page(ordered[: page_size + 1], page_size, position)
