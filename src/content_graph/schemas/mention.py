"""Mention Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from content_graph.models.mention import MentionTarget


class MentionResponse(BaseModel):
    """Where and by whom a user was mentioned."""

    id: int
    user_id: int
    author_id: int
    target_type: MentionTarget
    target_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
