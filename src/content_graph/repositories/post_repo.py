"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.util import identity_key

from content_graph.models.post import Post, Visibility

__all__ = ["COUNTER_COLUMNS", "PostRepository"]

# Public counter names mapped to their columns.
COUNTER_COLUMNS: dict[str, str] = {
    "views": "view_count",
    "likes": "like_count",
    "comments": "comment_count",
}


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier, including soft-deleted ones."""
        return self.session.get(Post, post_id)

    def get_live(self, post_id: int, *, for_update: bool = False) -> Post | None:
        """Return a post that has not been soft-deleted.

        Args:
            post_id: Identifier of the post.
            for_update: Take a row lock so concurrent edits of the same post
                serialize at the database (ignored by SQLite).
        """
        stmt = select(Post).where(Post.id == post_id, Post.deleted.is_(False))
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.execute(stmt).scalars().first()

    def create(self, *, author_id: int, content: str, visibility: Visibility) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(author_id=author_id, content=content, visibility=visibility)
        self.session.add(post)
        self.session.flush()
        return post

    def adjust_counter(self, post_id: int, column: str, delta: int) -> bool:
        """Apply ``column = column + delta`` in the database.

        The update is skipped when it would take the counter below zero.

        Returns:
            True when a row was updated.
        """
        counter = getattr(Post, column)
        stmt = (
            update(Post)
            .where(Post.id == post_id, counter + delta >= 0)
            .values({counter: counter + delta})
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self._expire(post_id, column)
        return result.rowcount > 0

    def _expire(self, post_id: int, column: str) -> None:
        # Loaded instances would otherwise keep the pre-update value.
        post = self.session.identity_map.get(identity_key(Post, post_id))
        if post is not None:
            self.session.expire(post, [column])

    # Query builders used by the feed and listing services.

    def live_posts(self) -> Select:
        """Return a select over posts that are not soft-deleted."""
        return select(Post).where(Post.deleted.is_(False))

    def public_posts(self) -> Select:
        """Return a select over live PUBLIC posts."""
        return self.live_posts().where(Post.visibility == Visibility.PUBLIC)
