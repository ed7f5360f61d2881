"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from redis.asyncio import Redis

from board.adapter.cache import RedisKeyValueCache
from board.config import CacheSettings
from board.domain.service import KeyValueCache
from board.util.di.base import ProviderBase
from board.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis_client(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[Redis]:
        """Provide shared Redis client, closed when the app container closes."""
        instrument_redis()
        client = Redis.from_url(cache_settings.url, decode_responses=True)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_key_value_cache(self, client: Redis) -> KeyValueCache:
        """Provide key-value cache."""
        return RedisKeyValueCache(client)
