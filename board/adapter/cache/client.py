"""Key-value cache clients."""

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from board.domain.error import StoreError
from board.domain.service.post_cache_service import KeyValueCache


class RedisKeyValueCache(KeyValueCache):
    """Redis backed key-value cache."""

    def __init__(self, client: Redis) -> None:
        """Initialize Redis cache.

        Args:
            client: Shared asyncio Redis client
        """
        self.client = client

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store a value, overwriting any previous entry."""
        try:
            await self.client.set(key, value, ex=ttl)
        except RedisError as e:
            logfire.error(
                "Cache write failed",
                key=key,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(f"Cache write failed for {key}") from e


class InMemoryKeyValueCache(KeyValueCache):
    """In-process cache for tests and local development.

    Expiry is recorded but not enforced.
    """

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.writes: list[str] = []

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store a value, overwriting any previous entry."""
        self.entries[key] = value
        self.ttls[key] = ttl
        self.writes.append(key)

    async def get(self, key: str) -> str | None:
        """Read a stored value."""
        return self.entries.get(key)
