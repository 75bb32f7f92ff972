from __future__ import annotations

from datetime import timedelta
from typing import Protocol


class CacheStore(Protocol):
    """String-keyed, string-valued distributed store with expiry."""

    async def get_string(self, key: str) -> str | None: ...

    async def set_string(self, key: str, value: str, *, ttl: timedelta) -> None:
        """Store ``value`` so that it expires ``ttl`` after this call."""
        ...

    async def remove(self, key: str) -> None: ...
