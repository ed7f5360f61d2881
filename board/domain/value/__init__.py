"""Domain value objects for the board."""

from board.domain.value.identifiers import PostId, UserId
from board.domain.value.types import VoteAction, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "VoteType",
    "VoteAction",
]
