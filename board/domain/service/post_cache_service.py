"""Popular post cache domain service."""

import json
from typing import Any, Optional

import logfire

from board.config import CacheSettings
from board.domain.model.cached_post import CachedPost
from board.domain.model.post import Post
from board.domain.value import PostId, VoteType

from .base import Service


class KeyValueCache:
    """Generic key-value cache interface."""

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Unconditionally store ``value`` under ``key``.

        Args:
            key: Cache key
            value: Serialized value
            ttl: Expiry in seconds, None to keep the entry until overwritten

        Raises:
            StoreError: If the cache store rejects the write
        """
        raise NotImplementedError


def flatten_content(content: Any) -> str:
    """Render post content as a single text value.

    Text content is returned unchanged; structured content is encoded as
    compact JSON.
    """
    if isinstance(content, str):
        return content
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False, default=str)


class PostCacheService(Service):
    """Writes read snapshots of posts that crossed the popularity threshold.

    Snapshots are advisory. They are overwritten on every qualifying vote
    and never removed here, even when the score later drops below the
    threshold.
    """

    def __init__(self, cache: KeyValueCache, cache_settings: CacheSettings) -> None:
        """Initialize post cache service.

        Args:
            cache: Key-value cache store
            cache_settings: Cache settings (threshold, key prefix, TTL)
        """
        self.cache = cache
        self.cache_settings = cache_settings

    def cache_key(self, post_id: PostId) -> str:
        """Cache key of a post's snapshot."""
        return f"{self.cache_settings.key_prefix}{post_id}"

    @staticmethod
    def build_snapshot(post: Post, current_vote: Optional[VoteType]) -> CachedPost:
        """Project a post and the acting user's vote into a snapshot."""
        return CachedPost(
            id=post.id,
            title=post.title,
            content=flatten_content(post.content),
            author_username=post.author.username or "",
            created_at=post.created_at,
            current_vote=current_vote,
        )

    async def maybe_cache(
        self, post: Post, score: int, current_vote: Optional[VoteType]
    ) -> CachedPost | None:
        """Write the post's snapshot if its score reaches the threshold.

        Args:
            post: Post the vote was cast on
            score: Post score after the vote
            current_vote: Acting user's resulting vote, None if removed

        Returns:
            The written snapshot, or None if the post is below the threshold

        Raises:
            StoreError: If the cache write fails
        """
        threshold = self.cache_settings.popularity_threshold
        if score < threshold:
            logfire.debug(
                "Post below popularity threshold, not cached",
                post_id=post.id,
                score=score,
                threshold=threshold,
            )
            return None

        with logfire.span("post_cache_service.maybe_cache", post_id=post.id, score=score):
            snapshot = self.build_snapshot(post, current_vote)
            await self.cache.set(
                self.cache_key(post.id),
                snapshot.model_dump_json(by_alias=True),
                ttl=self.cache_settings.ttl_seconds,
            )
            logfire.info(
                "Post snapshot cached",
                post_id=post.id,
                score=score,
                current_vote=current_vote.value if current_vote else None,
            )
            return snapshot
