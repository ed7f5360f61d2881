"""Mappers for converting between database rows and domain models.

Rows come from SQLAlchemy Core queries and map onto frozen Pydantic models.
"""

from typing import Any, Dict, Iterable

from board.domain.model import Post, PostAuthor, Vote
from board.domain.value import PostId, UserId, VoteType


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        type=VoteType(row["type"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "user_id": vote.user_id,
        "post_id": vote.post_id,
        "type": vote.type.value,
    }


def row_to_post(row: Dict[str, Any], votes: Iterable[Vote]) -> Post:
    """Convert a post row joined with its author to a Post domain model.

    Args:
        row: Database row as dict, with the author's ``username``
        votes: Votes on the post

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row.get("content"),
        author=PostAuthor(id=UserId(row["author_id"]), username=row.get("username")),
        created_at=row["created_at"],
        votes=tuple(votes),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict (votes excluded)."""
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "author_id": post.author.id,
        "created_at": post.created_at,
    }
