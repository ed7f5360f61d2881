"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, with its author and full vote collection.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create).

        The post's vote collection is not written; votes are owned by
        the vote repository.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
