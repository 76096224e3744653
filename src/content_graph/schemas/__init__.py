"""Pydantic schemas for API requests and responses."""

from .common import PageResponse
from .hashtag import HashtagResponse
from .mention import MentionResponse
from .post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "HashtagResponse",
    "MentionResponse",
    "PageResponse",
    "PostCreate",
    "PostResponse",
    "PostUpdate",
]
