"""Redis-backed CacheStore."""
from __future__ import annotations

from datetime import timedelta

import redis.asyncio as aioredis


class RedisCacheStore:
    """Implements application.ports.cache.CacheStore.

    Expects a client created with ``decode_responses=True``. Every key is
    namespaced with ``prefix``.
    """

    def __init__(self, redis: aioredis.Redis, *, prefix: str = "") -> None:
        self._redis = redis
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get_string(self, key: str) -> str | None:
        return await self._redis.get(self._key(key))

    async def set_string(self, key: str, value: str, *, ttl: timedelta) -> None:
        await self._redis.set(self._key(key), value, px=ttl)

    async def remove(self, key: str) -> None:
        await self._redis.delete(self._key(key))
