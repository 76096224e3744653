"""Hashtag Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class HashtagResponse(BaseModel):
    """A hashtag and the number of live posts using it."""

    id: int
    name: str
    usage_count: int

    model_config = ConfigDict(from_attributes=True)
