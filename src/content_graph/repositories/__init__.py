"""Data access helpers for content graph entities."""

from .hashtag_repo import HashtagRepository
from .mention_repo import MentionRepository
from .post_repo import PostRepository

__all__ = ["HashtagRepository", "MentionRepository", "PostRepository"]
