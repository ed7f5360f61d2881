"""Denormalized snapshot of a popular post for the cache store."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from board.domain.model.common import DomainModel
from board.domain.value import PostId, VoteType


class CachedPost(DomainModel):
    """Read-optimized projection of a post.

    Serialized with camelCase keys (authorUsername, createdAt, currentVote)
    because that is the shape the read path consumes.

    ``current_vote`` is the vote of the user whose request produced the
    snapshot, not of whoever later reads it.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: PostId
    title: str
    content: str
    author_username: str
    created_at: datetime
    current_vote: Optional[VoteType] = None
