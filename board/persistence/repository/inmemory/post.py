"""In-memory post repository for testing."""

from typing import Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.repository.vote import VoteRepository
from board.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Votes are read from the vote repository on every lookup, the way the
    PostgreSQL implementation reads them from the votes table.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        self._posts: dict[PostId, Post] = {}
        self._vote_repository = vote_repository

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID with its current votes."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        votes = await self._vote_repository.find_by_post(post_id)
        return post.model_copy(update={"votes": tuple(votes)})

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post.model_copy(update={"votes": ()})
        return post
