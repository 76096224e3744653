# src/content_graph/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from content_graph.models.post import Visibility


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    content: str = Field(..., min_length=1, max_length=5000, description="Post text")
    visibility: Visibility = Field(Visibility.PUBLIC, description="Who may read the post")


class PostUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    content: str | None = Field(None, max_length=5000)
    visibility: Visibility | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    author_id: int
    content: str
    visibility: Visibility
    view_count: int
    like_count: int
    comment_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
