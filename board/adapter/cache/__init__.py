"""Cache store adapters."""

from .client import InMemoryKeyValueCache, RedisKeyValueCache

__all__ = ["InMemoryKeyValueCache", "RedisKeyValueCache"]
