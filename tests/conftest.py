"""Test configuration and fixtures."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from board.domain.model.post import Post, PostAuthor
from board.domain.value import PostId, UserId

# Instrumentation in create_app() expects Logfire to be configured
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    post_id: PostId | None = None,
    title: str = "Test Post",
    content: Any = "Test content",
    username: str | None = "author",
    created_at: datetime | None = None,
) -> Post:
    """Helper function to build posts for tests.

    Args:
        post_id: Optional post ID (random if omitted)
        title: Post title
        content: Plain text or structured content
        username: Author display name
        created_at: Creation time (now if omitted)

    Returns:
        Post without votes
    """
    return Post(
        id=post_id or PostId(f"post-{uuid4().hex[:12]}"),
        title=title,
        content=content,
        author=PostAuthor(id=UserId(f"user-{uuid4().hex[:12]}"), username=username),
        created_at=created_at or datetime(2024, 1, 1, 12, 0, 0),
    )


def new_user_id() -> UserId:
    """Random user ID."""
    return UserId(f"user-{uuid4().hex[:12]}")
