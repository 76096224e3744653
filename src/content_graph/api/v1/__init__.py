"""Version 1 API endpoints."""

from .endpoints import feed_router, hashtags_router, mentions_router, posts_router

__all__ = [
    "feed_router",
    "hashtags_router",
    "mentions_router",
    "posts_router",
]
