"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.vote import CastVoteUseCase
from board.domain.repository import UnitOfWork
from board.domain.service import PostCacheService, VoteService
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        post_cache_service: PostCacheService,
        unit_of_work: UnitOfWork,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            post_cache_service=post_cache_service,
            unit_of_work=unit_of_work,
        )
