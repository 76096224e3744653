# src/content_graph/models/user.py
"""SQLAlchemy model for user identities referenced by the content graph."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from content_graph.db.session import Base
from content_graph.db.time import utcnow
from content_graph.db.types import BigIntId


class User(Base):
    """Account identity; profile and credentials live in other subsystems."""

    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    # Mentions resolve against this column, so it is matched case-sensitively.
    display_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
