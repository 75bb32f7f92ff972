"""Typed cache-aside layer over a CacheStore."""
from __future__ import annotations

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_json

from gearup_service.application.exceptions import CacheDeserializationError
from gearup_service.application.ports.cache import CacheStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL = timedelta(minutes=15)
# Store expiry has millisecond resolution.
MIN_TTL = timedelta(milliseconds=1)


@lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class CacheService:
    """JSON (de)serialization and TTL policy on top of a raw string store.

    Holds no state besides the store reference, so one instance can be
    shared by every request.
    """

    def __init__(self, store: CacheStore, *, default_ttl: timedelta = DEFAULT_TTL) -> None:
        if default_ttl < MIN_TTL:
            raise ValueError("default_ttl must be at least 1 millisecond")
        self._store = store
        self._default_ttl = default_ttl

    async def get(self, key: str, tp: type[T]) -> T | None:
        """Return the cached value, or None on a miss.

        Raises CacheDeserializationError when an entry exists but cannot be
        read back as ``tp``.
        """
        data = await self._store.get_string(key)
        if not data:
            return None

        try:
            return _adapter(tp).validate_json(data)
        except PydanticValidationError as exc:
            logger.error(
                "Cache entry %s does not match %s: %d error(s)",
                key,
                getattr(tp, "__name__", tp),
                exc.error_count(),
            )
            raise CacheDeserializationError(key) from exc

    async def set(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        expires_in = ttl if ttl is not None else self._default_ttl
        if expires_in < MIN_TTL:
            raise ValueError("ttl must be at least 1 millisecond")
        await self._store.set_string(key, to_json(value).decode(), ttl=expires_in)

    async def remove(self, key: str) -> None:
        await self._store.remove(key)

    async def get_or_set(
        self,
        key: str,
        tp: type[T],
        factory: Callable[[], Awaitable[T | None]],
        ttl: timedelta | None = None,
    ) -> T | None:
        cached = await self.get(key, tp)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        value = await factory()
        if value is not None:
            await self.set(key, value, ttl)
        return value
