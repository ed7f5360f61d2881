"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId
from board.persistence.mappers import post_to_dict, row_to_post, row_to_vote
from board.persistence.tables import posts_table, users_table, votes_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, joined with its author and votes."""
        stmt = (
            select(posts_table, users_table.c.username)
            .select_from(
                posts_table.outerjoin(
                    users_table, posts_table.c.author_id == users_table.c.id
                )
            )
            .where(posts_table.c.id == post_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        votes_stmt = select(votes_table).where(votes_table.c.post_id == post_id)
        votes_result = await self.session.execute(votes_stmt)
        votes = [row_to_vote(v._asdict()) for v in votes_result.fetchall()]

        return row_to_post(row._asdict(), votes)

    async def save(self, post: Post) -> Post:
        """Save a post (create)."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post
