"""Mock persistence providers for testing."""

from dishka import Scope, provide

from board.domain.repository import PostRepository, UnitOfWork, VoteRepository
from board.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scoped: state survives across requests of one test container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self, vote_repository: VoteRepository) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(vote_repository)

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
