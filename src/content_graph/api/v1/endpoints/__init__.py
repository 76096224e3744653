"""API endpoint modules for version 1."""

from .feed import router as feed_router
from .hashtags import router as hashtags_router
from .mentions import router as mentions_router
from .posts import router as posts_router

__all__ = [
    "feed_router",
    "hashtags_router",
    "mentions_router",
    "posts_router",
]
