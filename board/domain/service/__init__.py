"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_cache_service import KeyValueCache, PostCacheService, flatten_content
from .post_service import PostService
from .vote_service import VoteReconciliation, VoteService

__all__ = [
    "JWTService",
    "KeyValueCache",
    "PostCacheService",
    "PostService",
    "Service",
    "VoteReconciliation",
    "VoteService",
    "flatten_content",
]
