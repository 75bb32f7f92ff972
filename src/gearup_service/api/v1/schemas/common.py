from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gearup_service.application.pagination.page import CursorPage

T = TypeVar("T")


class CursorPageResponse(BaseModel, Generic[T]):
    """Wire shape: ``{"items": [...], "nextCursor": str | null, "hasMore": bool}``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T]  # type: ignore[type-var]
    next_cursor: str | None = None
    has_more: bool = False

    @classmethod
    def from_page(
        cls,
        page: CursorPage[Any],
        convert: Callable[[Any], T],
    ) -> CursorPageResponse[T]:
        return cls(
            items=[convert(item) for item in page.items],
            next_cursor=page.next_cursor,
            has_more=page.has_more,
        )
