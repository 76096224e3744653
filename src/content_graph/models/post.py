# src/content_graph/models/post.py
"""SQLAlchemy models for posts and their visibility."""

import enum
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from content_graph.db.session import Base
from content_graph.db.time import utcnow
from content_graph.db.types import BigIntId


class Visibility(str, enum.Enum):
    """Who may read a post."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    FOLLOWERS = "FOLLOWERS"


class Post(Base):
    """Primary content entity produced by users.

    The three counters are denormalized aggregates owned by other subsystems
    (views here, likes and comments elsewhere). They are only ever changed with
    relative SQL updates, never by assigning a value read earlier.
    """

    __tablename__ = "post"
    __table_args__ = (
        CheckConstraint("view_count >= 0", name="ck_post_view_count"),
        CheckConstraint("like_count >= 0", name="ck_post_like_count"),
        CheckConstraint("comment_count >= 0", name="ck_post_comment_count"),
        Index("ix_post_author_created", "author_id", "created_at"),
        Index("ix_post_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    author_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("app_user.id"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    visibility: Mapped[Visibility] = mapped_column(
        Enum(Visibility, name="post_visibility"),
        nullable=False,
        default=Visibility.PUBLIC,
    )

    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    like_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Soft delete keeps the row (and its counters) for analytics.
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    # Set explicitly on edit; counter updates leave it alone.
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
