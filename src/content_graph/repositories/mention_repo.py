"""Data access helpers for mention records."""
from __future__ import annotations

import logging

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from content_graph.models.mention import Mention, MentionTarget

__all__ = ["MentionRepository"]

logger = logging.getLogger(__name__)


class MentionRepository:
    """Persistence for mention rows keyed by (user, target type, target id)."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def for_target(self, target_type: MentionTarget, target_id: int) -> list[Mention]:
        """Return the mentions recorded for one post or comment."""
        return list(
            self.session.execute(
                select(Mention)
                .where(Mention.target_type == target_type, Mention.target_id == target_id)
                .order_by(Mention.id)
            ).scalars()
        )

    def add(
        self,
        *,
        user_id: int,
        author_id: int,
        target_type: MentionTarget,
        target_id: int,
    ) -> Mention | None:
        """Insert a mention row inside a savepoint.

        Returns:
            None if the same (user, target) row was inserted concurrently.
        """
        mention = Mention(
            user_id=user_id,
            author_id=author_id,
            target_type=target_type,
            target_id=target_id,
        )
        try:
            with self.session.begin_nested():
                self.session.add(mention)
                self.session.flush()
        except IntegrityError:
            logger.warning(
                "Mention of user=%s in %s %s already exists; skipping",
                user_id, target_type.value, target_id,
            )
            return None
        return mention

    def remove(self, mention: Mention) -> None:
        """Delete a single mention row."""
        self.session.delete(mention)
        self.session.flush()

    def remove_for_target(self, target_type: MentionTarget, target_id: int) -> int:
        """Delete every mention for a target and return how many went."""
        result = self.session.execute(
            delete(Mention)
            .where(Mention.target_type == target_type, Mention.target_id == target_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def count_for_user(self, user_id: int) -> int:
        """Return how many times ``user_id`` has been mentioned."""
        return self.session.execute(
            select(func.count()).select_from(Mention).where(Mention.user_id == user_id)
        ).scalar_one()

    def of_user(self, user_id: int, target_type: MentionTarget | None = None) -> Select:
        """Mentions of a user, newest first, optionally for one target type."""
        stmt = select(Mention).where(Mention.user_id == user_id)
        if target_type is not None:
            stmt = stmt.where(Mention.target_type == target_type)
        return stmt.order_by(Mention.created_at.desc(), Mention.id.desc())
