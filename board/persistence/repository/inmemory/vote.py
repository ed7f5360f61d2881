"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import PostId, UserId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user_id, post_id), mirroring the table's primary key.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, PostId], Vote] = {}

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        return self._votes.get((user_id, post_id))

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        return [v for v in self._votes.values() if v.post_id == post_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        key = (vote.user_id, vote.post_id)
        if key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[key] = vote
        return vote

    async def update_type(
        self, user_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> Vote:
        """Change the direction of an existing vote."""
        vote = Vote(user_id=user_id, post_id=post_id, type=vote_type)
        self._votes[(user_id, post_id)] = vote
        return vote

    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's vote on a post."""
        return self._votes.pop((user_id, post_id), None) is not None
