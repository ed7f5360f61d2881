"""Post domain service."""

import logfire

from board.domain.model.post import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span("post_service.save_post", post_id=post.id, title=post.title):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=saved.id)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post with its author and votes.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info(
                    "Post found", post_id=post_id, title=post.title, votes=len(post.votes)
                )
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post
