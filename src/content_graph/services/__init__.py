"""Business logic services for the content graph."""

from .feed_service import FeedService
from .hashtag_service import HashtagService
from .mention_service import MentionService
from .post_service import PostService
from .visibility import VisibilityPolicy

__all__ = [
    "FeedService",
    "HashtagService",
    "MentionService",
    "PostService",
    "VisibilityPolicy",
]
