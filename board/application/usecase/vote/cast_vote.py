"""Cast vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from board.application.usecase.base import BaseUseCase
from board.domain.error import StoreError
from board.domain.repository import UnitOfWork
from board.domain.service import PostCacheService, VoteService
from board.domain.value import PostId, UserId, VoteAction, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str = Field(min_length=1)
    vote_type: VoteType
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    post_id: str
    action: VoteAction
    vote_type: Optional[VoteType]
    score: int
    cached: bool


class CastVoteUseCase(BaseUseCase):
    """Use case for casting, flipping or withdrawing a vote on a post."""

    def __init__(
        self,
        vote_service: VoteService,
        post_cache_service: PostCacheService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            post_cache_service: Popular post cache service
            unit_of_work: Transaction boundary for the vote mutation
        """
        self.vote_service = vote_service
        self.post_cache_service = post_cache_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The vote mutation is committed before the cache is touched, so a
        failed cache write never loses a vote; it only leaves the snapshot
        stale until the next vote on the post.

        Args:
            request: Cast vote request

        Returns:
            Resulting vote state and score

        Raises:
            NotFoundError: If the post does not exist
            StoreError: If the vote store or cache store fails
        """
        user_id = UserId(request.user_id)
        post_id = PostId(request.post_id)

        result = await self.vote_service.reconcile(user_id, post_id, request.vote_type)

        try:
            await self.unit_of_work.commit()
        except SQLAlchemyError as e:
            logfire.error("Vote commit failed", post_id=post_id, error=str(e))
            await self.unit_of_work.rollback()
            raise StoreError(f"Could not commit vote on post {post_id}") from e

        snapshot = await self.post_cache_service.maybe_cache(
            result.post, result.score, result.vote_type
        )

        return CastVoteResponse(
            post_id=post_id,
            action=result.action,
            vote_type=result.vote_type,
            score=result.score,
            cached=snapshot is not None,
        )
