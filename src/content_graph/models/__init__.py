"""SQLAlchemy models for the content graph."""

from .follow import Follow
from .hashtag import Hashtag, PostHashtag
from .mention import Mention, MentionTarget
from .post import Post, Visibility
from .user import User

__all__ = [
    "Follow",
    "Hashtag", "PostHashtag",
    "Mention", "MentionTarget",
    "Post", "Visibility",
    "User",
]
