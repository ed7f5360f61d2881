"""SQLAlchemy table definitions for the board.

Primary keys are text identifiers issued by the platform.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("username", String(255), nullable=True, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", JSONB, nullable=True),  # Plain text or editor JSON
    Column(
        "author_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "user_id", String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "post_id", String(64), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", Enum("UP", "DOWN", name="vote_type"), nullable=False),
    # One vote per user per post; concurrent votes on the same pair serialize here
    PrimaryKeyConstraint("user_id", "post_id", name="pk_votes_user_post"),
)

Index("idx_votes_post_id", votes_table.c.post_id)
