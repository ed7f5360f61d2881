"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.post import PostRepository
from board.domain.repository.unit_of_work import UnitOfWork
from board.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "VoteRepository",
    "UnitOfWork",
]
