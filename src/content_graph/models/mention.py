# src/content_graph/models/mention.py
"""Records of users referenced with @name inside posts and comments."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from content_graph.db.session import Base
from content_graph.db.time import utcnow
from content_graph.db.types import BigIntId


class MentionTarget(str, enum.Enum):
    """Kind of content a mention lives in."""

    POST = "POST"
    COMMENT = "COMMENT"


class Mention(Base):
    """One user referenced by one piece of content.

    ``target_id`` is polymorphic over ``target_type`` so it carries no foreign key.
    """

    __tablename__ = "mention"
    __table_args__ = (
        UniqueConstraint("user_id", "target_type", "target_id", name="uq_mention_target"),
        Index("ix_mention_target", "target_type", "target_id"),
        Index("ix_mention_user_created", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    # The mentioned user.
    user_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    # The author of the content doing the mentioning.
    author_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    target_type: Mapped[MentionTarget] = mapped_column(
        Enum(MentionTarget, name="mention_target"), nullable=False
    )
    target_id: Mapped[int] = mapped_column(BigIntId, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
