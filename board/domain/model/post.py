"""Post aggregate root.

Posts are read-only from the voting flow's point of view; only their
vote collection changes. The score is never stored, it is always derived
from the votes.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.vote import Vote, compute_score
from board.domain.value import PostId, UserId


class PostAuthor(DomainModel):
    """Author reference embedded in a post."""

    id: UserId
    username: Optional[str] = None


class Post(DomainModel):
    """Post aggregate root.

    ``content`` is either plain text or structured JSON produced by the
    editor (a dict/list tree of blocks).
    """

    id: PostId
    title: str = Field(max_length=300)
    content: Any = None
    author: PostAuthor
    created_at: datetime = Field(default_factory=datetime.now)
    votes: tuple[Vote, ...] = ()

    @property
    def score(self) -> int:
        """Aggregate score of the post's current votes."""
        return compute_score(self.votes)
