# src/content_graph/models/hashtag.py
"""Hashtags and their association with posts."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from content_graph.db.session import Base
from content_graph.db.time import utcnow
from content_graph.db.types import BigIntId

HASHTAG_NAME_MAX_LENGTH = 100


class Hashtag(Base):
    """A normalized tag name with the number of live posts linked to it.

    Rows are never deleted, even when ``usage_count`` drops to zero.
    """

    __tablename__ = "hashtag"
    __table_args__ = (
        CheckConstraint("usage_count >= 0", name="ck_hashtag_usage_count"),
        Index("ix_hashtag_usage_count", "usage_count"),
    )

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(HASHTAG_NAME_MAX_LENGTH), unique=True, nullable=False
    )
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )


class PostHashtag(Base):
    """Join row linking a post to a hashtag.

    The composite primary key allows at most one link per pair.
    """

    __tablename__ = "post_hashtag"
    __table_args__ = (Index("ix_post_hashtag_hashtag_id", "hashtag_id"),)

    post_id: Mapped[int] = mapped_column(
        BigIntId,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    hashtag_id: Mapped[int] = mapped_column(
        BigIntId,
        ForeignKey("hashtag.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    hashtag: Mapped[Hashtag] = relationship("Hashtag", lazy="joined")
