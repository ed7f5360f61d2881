"""Vote domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError

from board.domain.error import NotFoundError, StoreError
from board.domain.model.post import Post
from board.domain.model.vote import Vote, compute_score
from board.domain.repository import VoteRepository
from board.domain.value import PostId, UserId, VoteAction, VoteType

from .base import Service
from .post_service import PostService


@dataclass(frozen=True)
class VoteReconciliation:
    """Outcome of reconciling a vote request with the stored vote."""

    post: Post
    action: VoteAction
    vote_type: Optional[VoteType]  # None once the vote has been toggled off
    score: int


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def reconcile(
        self, user_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> VoteReconciliation:
        """Apply a vote request on top of the user's existing vote.

        - No existing vote: create one with the requested type
        - Existing vote of the same type: delete it (toggle-off)
        - Existing vote of the other type: flip it in place

        Exactly one store mutation is performed. Concurrent requests for
        the same user and post are serialized by the store's primary
        key on (user_id, post_id), not by this service.

        Args:
            user_id: Acting user ID
            post_id: Post ID
            vote_type: Requested vote direction

        Returns:
            The resulting vote state and the recomputed post score

        Raises:
            NotFoundError: If the post does not exist (nothing is written)
            StoreError: If a store operation fails
        """
        with logfire.span(
            "vote_service.reconcile",
            post_id=post_id,
            user_id=user_id,
            vote_type=vote_type.value,
        ):
            try:
                post = await self.post_service.get_post_by_id(post_id)
                if not post:
                    raise NotFoundError("Post", post_id)

                existing = await self.vote_repository.find_by_user_and_post(
                    user_id, post_id
                )

                if existing is None:
                    await self.vote_repository.save(
                        Vote(user_id=user_id, post_id=post_id, type=vote_type)
                    )
                    action, resulting = VoteAction.CREATED, vote_type
                elif existing.type == vote_type:
                    await self.vote_repository.delete_by_user_and_post(
                        user_id, post_id
                    )
                    action, resulting = VoteAction.DELETED, None
                else:
                    await self.vote_repository.update_type(user_id, post_id, vote_type)
                    action, resulting = VoteAction.UPDATED, vote_type
            except SQLAlchemyError as e:
                logfire.error(
                    "Vote store operation failed",
                    post_id=post_id,
                    user_id=user_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise StoreError(f"Could not reconcile vote on post {post_id}") from e

            score = self.recompute_score(post, user_id, resulting)

            logfire.info(
                "Vote reconciled",
                post_id=post_id,
                user_id=user_id,
                action=action.value,
                vote_type=resulting.value if resulting else None,
                score=score,
            )

            return VoteReconciliation(
                post=post, action=action, vote_type=resulting, score=score
            )

    @staticmethod
    def recompute_score(
        post: Post, user_id: UserId, resulting: Optional[VoteType]
    ) -> int:
        """Score of ``post`` after the acting user's vote became ``resulting``.

        The post's vote collection was loaded before the mutation, so the
        acting user's stored row is replaced by their resulting state
        instead of being counted as loaded.

        Args:
            post: Post as loaded before the mutation
            user_id: Acting user ID
            resulting: Acting user's vote after the mutation, None if removed

        Returns:
            Recomputed score
        """
        others = (vote for vote in post.votes if vote.user_id != user_id)
        return compute_score(others) + (resulting.weight if resulting else 0)
