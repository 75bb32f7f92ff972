from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import pytest

from gearup_service.infrastructure.cache.redis_store import RedisCacheStore


@dataclass
class RecordingRedis:
    _data: dict[str, str] = field(default_factory=dict)
    calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    async def get(self, name: str) -> str | None:
        self.calls.append(("get", (name,), {}))
        return self._data.get(name)

    async def set(self, name: str, value: str, **kwargs: Any) -> bool:
        self.calls.append(("set", (name, value), kwargs))
        self._data[name] = value
        return True

    async def delete(self, *names: str) -> int:
        self.calls.append(("delete", names, {}))
        return sum(1 for n in names if self._data.pop(n, None) is not None)


@pytest.mark.asyncio
async def test_set_string_uses_prefix_and_expiry():
    redis = RecordingRedis()
    store = RedisCacheStore(redis, prefix="gearup:")  # type: ignore[arg-type]

    await store.set_string("post:1", '{"a":1}', ttl=timedelta(minutes=15))

    assert redis.calls == [
        ("set", ("gearup:post:1", '{"a":1}'), {"px": timedelta(minutes=15)}),
    ]


@pytest.mark.asyncio
async def test_get_and_remove_are_prefixed():
    redis = RecordingRedis(_data={"gearup:k": "v"})
    store = RedisCacheStore(redis, prefix="gearup:")  # type: ignore[arg-type]

    assert await store.get_string("k") == "v"
    assert await store.get_string("missing") is None

    await store.remove("k")
    await store.remove("k")

    assert redis._data == {}
    assert redis.calls[-1] == ("delete", ("gearup:k",), {})


@pytest.mark.asyncio
async def test_sub_second_ttl_keeps_millisecond_precision():
    redis = RecordingRedis()
    store = RedisCacheStore(redis)  # type: ignore[arg-type]

    await store.set_string("k", "1", ttl=timedelta(milliseconds=500))

    assert redis.calls == [("set", ("k", "1"), {"px": timedelta(milliseconds=500)})]
