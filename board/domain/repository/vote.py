"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.vote import Vote
from board.domain.value import PostId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Every mutation is addressed by the (user_id, post_id) identity key.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/post pair
        """
        pass

    @abstractmethod
    async def update_type(
        self, user_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> Vote:
        """Change the direction of an existing vote in place.

        Args:
            user_id: The user's ID
            post_id: The post's ID
            vote_type: New vote direction

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
