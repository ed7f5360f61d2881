"""Domain model entities for the board."""

from board.domain.model.cached_post import CachedPost
from board.domain.model.post import Post, PostAuthor
from board.domain.model.vote import Vote, compute_score

__all__ = [
    "Post",
    "PostAuthor",
    "Vote",
    "CachedPost",
    "compute_score",
]
