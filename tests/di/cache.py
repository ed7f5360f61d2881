"""Mock cache providers for testing."""

from dishka import Scope, provide

from board.adapter.cache import InMemoryKeyValueCache
from board.domain.service import KeyValueCache
from board.util.di.infrastructure.cache import CacheProvider


class MockCacheProvider(CacheProvider):
    """Mock cache provider using an in-process dictionary."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_key_value_cache(self) -> KeyValueCache:
        """Provide in-memory key-value cache."""
        return InMemoryKeyValueCache()
