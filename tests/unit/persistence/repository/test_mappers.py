"""Unit tests for row mappers."""

from datetime import datetime, timezone

from board.domain.model.vote import Vote
from board.domain.value import PostId, UserId, VoteType
from board.persistence.mappers import post_to_dict, row_to_post, row_to_vote, vote_to_dict
from tests.conftest import make_post


def test_vote_round_trips_through_row():
    vote = Vote(user_id=UserId("u1"), post_id=PostId("p1"), type=VoteType.DOWN)

    row = vote_to_dict(vote)

    assert row == {"user_id": "u1", "post_id": "p1", "type": "DOWN"}
    assert row_to_vote(row) == vote


def test_row_to_post_reads_joined_username():
    created = datetime(2024, 5, 1, tzinfo=timezone.utc)
    row = {
        "id": "p1",
        "title": "Title",
        "content": {"blocks": []},
        "author_id": "u1",
        "created_at": created,
        "username": "alice",
    }
    votes = [Vote(user_id=UserId("u2"), post_id=PostId("p1"), type=VoteType.UP)]

    post = row_to_post(row, votes)

    assert post.author.username == "alice"
    assert post.content == {"blocks": []}
    assert post.created_at == created
    assert post.score == 1


def test_post_to_dict_excludes_votes():
    post = make_post(post_id=PostId("p1"))

    row = post_to_dict(post)

    assert "votes" not in row
    assert row["author_id"] == post.author.id


def test_row_to_post_accepts_empty_title():
    row = {
        "id": "p1",
        "title": "",
        "content": "body",
        "author_id": "u1",
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
        "username": None,
    }

    post = row_to_post(row, [])

    assert post.title == ""
    assert post.author.username is None
