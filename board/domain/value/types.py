"""Domain value types."""

from enum import Enum


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "UP"
    DOWN = "DOWN"

    @property
    def weight(self) -> int:
        """Contribution of one vote of this type to a post's score."""
        return 1 if self is VoteType.UP else -1


class VoteAction(str, Enum):
    """Durable mutation performed while reconciling a vote."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
