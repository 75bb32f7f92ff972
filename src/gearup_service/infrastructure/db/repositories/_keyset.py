"""Keyset predicate and ordering for (created_at, id) timelines."""
from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from sqlalchemy import Select
from sqlalchemy.orm import InstrumentedAttribute

from gearup_service.application.pagination.cursor import Cursor, as_utc
from gearup_service.application.pagination.page import SortDirection

S = TypeVar("S", bound=Select[Any])


def apply_keyset(
    stmt: S,
    created_at: InstrumentedAttribute[datetime],
    id_: InstrumentedAttribute[Any],
    *,
    after: Cursor | None,
    limit: int,
    direction: SortDirection = SortDirection.DESC,
) -> S:
    if direction is SortDirection.DESC:
        stmt = stmt.order_by(created_at.desc(), id_.desc())
    else:
        stmt = stmt.order_by(created_at.asc(), id_.asc())

    if after is not None:
        ts = as_utc(after.created_at)
        if direction is SortDirection.DESC:
            stmt = stmt.where(
                (created_at < ts) | ((created_at == ts) & (id_ < after.id))
            )
        else:
            stmt = stmt.where(
                (created_at > ts) | ((created_at == ts) & (id_ > after.id))
            )
    return stmt.limit(limit)
