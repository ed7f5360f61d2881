"""Vote entity.

A vote is one user's directional opinion on one post. The pair
(user_id, post_id) is the identity of a vote: a user holds at most one
vote per post, enforced by the primary key of the votes table.
"""

from typing import Iterable

from board.domain.model.common import DomainModel
from board.domain.value import PostId, UserId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Lifecycle:
    - Created on a user's first vote on a post
    - Type flipped when the user votes the opposite direction
    - Deleted when the user repeats the same direction (toggle-off)
    """

    user_id: UserId
    post_id: PostId
    type: VoteType


def compute_score(votes: Iterable[Vote]) -> int:
    """Fold a vote collection into a score.

    UP counts +1 and DOWN counts -1, so the result is
    count(UP) - count(DOWN) regardless of ordering.
    """
    return sum(vote.type.weight for vote in votes)
