"""Unit tests for cache clients."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from board.adapter.cache import InMemoryKeyValueCache, RedisKeyValueCache
from board.domain.error import StoreError


class TestRedisKeyValueCache:
    """Tests for the Redis client wrapper."""

    @pytest.mark.asyncio
    async def test_set_passes_ttl_as_expiry(self):
        client = AsyncMock()
        cache = RedisKeyValueCache(client)

        await cache.set("post:abc", '{"id":"abc"}', ttl=60)

        client.set.assert_awaited_once_with("post:abc", '{"id":"abc"}', ex=60)

    @pytest.mark.asyncio
    async def test_set_without_ttl_never_expires(self):
        client = AsyncMock()
        cache = RedisKeyValueCache(client)

        await cache.set("post:abc", "{}")

        client.set.assert_awaited_once_with("post:abc", "{}", ex=None)

    @pytest.mark.asyncio
    async def test_redis_failure_raises_store_error(self):
        client = AsyncMock()
        client.set.side_effect = RedisConnectionError("connection refused")
        cache = RedisKeyValueCache(client)

        with pytest.raises(StoreError, match="post:abc"):
            await cache.set("post:abc", "{}")


class TestInMemoryKeyValueCache:
    """Tests for the in-process cache."""

    @pytest.mark.asyncio
    async def test_set_overwrites(self):
        cache = InMemoryKeyValueCache()

        await cache.set("post:1", "first")
        await cache.set("post:1", "second", ttl=5)

        assert await cache.get("post:1") == "second"
        assert cache.ttls["post:1"] == 5
        assert cache.writes == ["post:1", "post:1"]
