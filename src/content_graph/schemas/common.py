"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemT = TypeVar("ItemT")


class PageResponse(BaseModel, Generic[ItemT]):
    """One page of a paginated listing."""

    items: list[ItemT]
    total: int = Field(..., description="Rows matching the query across all pages.")
    page: int = Field(..., description="Zero-based page index.")
    size: int = Field(..., description="Effective page size after clamping.")
    has_next: bool

    model_config = ConfigDict(from_attributes=True)
