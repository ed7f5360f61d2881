"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, CacheSettings
from board.domain.repository import PostRepository, VoteRepository
from board.domain.service import (
    JWTService,
    KeyValueCache,
    PostCacheService,
    PostService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_service: PostService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, post_service=post_service)

    @provide
    def get_post_cache_service(
        self, cache: KeyValueCache, cache_settings: CacheSettings
    ) -> PostCacheService:
        """Provide popular post cache service."""
        return PostCacheService(cache=cache, cache_settings=cache_settings)
