from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class CursorPage(Generic[T]):
    """One page of a keyset-ordered listing.

    ``next_cursor`` is only set when ``has_more`` is true.
    """

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False

    def __post_init__(self) -> None:
        if self.next_cursor is not None and not self.has_more:
            raise ValueError("next_cursor must be None when has_more is False")
