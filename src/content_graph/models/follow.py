# src/content_graph/models/follow.py
"""Directed follow edges between users."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from content_graph.db.session import Base
from content_graph.db.time import utcnow
from content_graph.db.types import BigIntId


class Follow(Base):
    """A follower → followee edge. Written by the follow subsystem, read here."""

    __tablename__ = "follow"
    __table_args__ = (
        UniqueConstraint("follower_id", "followee_id", name="uq_follow_pair"),
        CheckConstraint("follower_id <> followee_id", name="ck_follow_not_self"),
        Index("ix_follow_followee_id", "followee_id"),
    )

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    follower_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    followee_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
