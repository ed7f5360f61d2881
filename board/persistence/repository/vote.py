"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import PostId, UserId, VoteType
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _identity(user_id: UserId, post_id: PostId):
        return and_(
            votes_table.c.user_id == user_id,
            votes_table.c.post_id == post_id,
        )

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(self._identity(user_id, post_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        stmt = select(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_type(
        self, user_id: UserId, post_id: PostId, vote_type: VoteType
    ) -> Vote:
        """Change the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(self._identity(user_id, post_id))
            .values(type=vote_type.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return Vote(user_id=user_id, post_id=post_id, type=vote_type)

    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's vote on a post."""
        stmt = delete(votes_table).where(self._identity(user_id, post_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
