"""Unit tests for vote score computation."""

import random

from board.domain.model.vote import Vote, compute_score
from board.domain.value import PostId, UserId, VoteType
from tests.conftest import make_post


def _votes(ups: int, downs: int) -> list[Vote]:
    types = [VoteType.UP] * ups + [VoteType.DOWN] * downs
    return [
        Vote(user_id=UserId(f"user-{i}"), post_id=PostId("post-1"), type=vote_type)
        for i, vote_type in enumerate(types)
    ]


def test_empty_collection_scores_zero():
    assert compute_score([]) == 0


def test_score_is_ups_minus_downs():
    assert compute_score(_votes(5, 2)) == 3
    assert compute_score(_votes(1, 4)) == -3


def test_score_ignores_order():
    votes = _votes(7, 3)
    shuffled = votes[:]
    random.Random(42).shuffle(shuffled)

    assert compute_score(shuffled) == compute_score(votes) == 4
    assert compute_score(reversed(votes)) == 4


def test_post_score_uses_its_votes():
    post = make_post().model_copy(update={"votes": tuple(_votes(2, 1))})

    assert post.score == 1
