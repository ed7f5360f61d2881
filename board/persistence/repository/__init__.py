"""PostgreSQL repository implementations."""

from board.persistence.repository.post import PostgresPostRepository
from board.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from board.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "SqlAlchemyUnitOfWork",
]
