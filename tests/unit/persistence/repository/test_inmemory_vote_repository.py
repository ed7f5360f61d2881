"""Unit tests for the in-memory vote repository."""

import pytest
from sqlalchemy.exc import IntegrityError

from board.domain.model.vote import Vote
from board.domain.value import PostId, UserId, VoteType
from board.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_post

USER = UserId("user-1")
POST = PostId("post-1")


class TestInMemoryVoteRepository:
    """Tests for identity-key behaviour."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self):
        """A second row for the same user and post should be rejected."""
        repo = InMemoryVoteRepository()
        await repo.save(Vote(user_id=USER, post_id=POST, type=VoteType.UP))

        with pytest.raises(IntegrityError):
            await repo.save(Vote(user_id=USER, post_id=POST, type=VoteType.DOWN))

    @pytest.mark.asyncio
    async def test_update_type_replaces_row(self):
        repo = InMemoryVoteRepository()
        await repo.save(Vote(user_id=USER, post_id=POST, type=VoteType.UP))

        updated = await repo.update_type(USER, POST, VoteType.DOWN)

        assert updated.type == VoteType.DOWN
        assert await repo.find_by_post(POST) == [updated]

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_existed(self):
        repo = InMemoryVoteRepository()
        await repo.save(Vote(user_id=USER, post_id=POST, type=VoteType.UP))

        assert await repo.delete_by_user_and_post(USER, POST) is True
        assert await repo.delete_by_user_and_post(USER, POST) is False
        assert await repo.find_by_user_and_post(USER, POST) is None


class TestInMemoryPostRepository:
    """Tests for post lookups."""

    @pytest.mark.asyncio
    async def test_find_by_id_includes_current_votes(self):
        votes = InMemoryVoteRepository()
        posts = InMemoryPostRepository(votes)
        post = await posts.save(make_post(post_id=POST))
        await votes.save(Vote(user_id=USER, post_id=POST, type=VoteType.UP))

        found = await posts.find_by_id(post.id)

        assert found is not None
        assert found.score == 1
        assert [v.user_id for v in found.votes] == [USER]

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_post(self):
        posts = InMemoryPostRepository(InMemoryVoteRepository())

        assert await posts.find_by_id(PostId("missing")) is None
