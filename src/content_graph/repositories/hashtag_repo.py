"""Data access helpers for hashtags and post links."""
from __future__ import annotations

import logging

from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.util import identity_key

from content_graph.models.hashtag import Hashtag, PostHashtag
from content_graph.models.post import Post, Visibility

__all__ = ["HashtagRepository"]

logger = logging.getLogger(__name__)


class HashtagRepository:
    """Persistence for hashtag rows, their usage counters and post links."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_name(self, name: str) -> Hashtag | None:
        """Return the hashtag with an exact (already normalized) name."""
        return self.session.execute(
            select(Hashtag).where(Hashtag.name == name)
        ).scalars().first()

    def insert(self, name: str) -> Hashtag:
        """Insert a hashtag inside a savepoint.

        Raises:
            IntegrityError: If another transaction already created ``name``.
                Only the savepoint is rolled back, so the caller's transaction
                stays usable.
        """
        with self.session.begin_nested():
            hashtag = Hashtag(name=name, usage_count=0)
            self.session.add(hashtag)
            self.session.flush()
        return hashtag

    def adjust_usage(self, hashtag_id: int, delta: int) -> bool:
        """Apply ``usage_count = usage_count + delta``, never going below zero."""
        stmt = (
            update(Hashtag)
            .where(Hashtag.id == hashtag_id, Hashtag.usage_count + delta >= 0)
            .values(usage_count=Hashtag.usage_count + delta)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        hashtag = self.session.identity_map.get(identity_key(Hashtag, hashtag_id))
        if hashtag is not None:
            self.session.expire(hashtag, ["usage_count"])
        return result.rowcount > 0

    # Post links

    def links_for_post(self, post_id: int) -> list[PostHashtag]:
        """Return the post's current links with their hashtags loaded."""
        return list(
            self.session.execute(
                select(PostHashtag)
                .where(PostHashtag.post_id == post_id)
                .order_by(PostHashtag.created_at, PostHashtag.hashtag_id)
            ).scalars()
        )

    def add_link(self, post_id: int, hashtag_id: int) -> bool:
        """Link a post to a hashtag.

        Returns:
            False when the link already exists; nothing is written then.
        """
        if self.session.get(PostHashtag, (post_id, hashtag_id)) is not None:
            return False
        try:
            with self.session.begin_nested():
                self.session.add(PostHashtag(post_id=post_id, hashtag_id=hashtag_id))
                self.session.flush()
        except IntegrityError:
            logger.warning(
                "Link post=%s hashtag=%s created concurrently; skipping", post_id, hashtag_id
            )
            return False
        return True

    def remove_link(self, post_id: int, hashtag_id: int) -> bool:
        """Delete a post link, returning False if it was already gone."""
        link = self.session.identity_map.get(identity_key(PostHashtag, (post_id, hashtag_id)))
        if link is not None:
            self.session.expunge(link)
        result = self.session.execute(
            delete(PostHashtag)
            .where(PostHashtag.post_id == post_id, PostHashtag.hashtag_id == hashtag_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    # Query builders

    def trending(self) -> Select:
        """Hashtags in use, most used first; ties ordered by id for stable pages."""
        return (
            select(Hashtag)
            .where(Hashtag.usage_count > 0)
            .order_by(Hashtag.usage_count.desc(), Hashtag.id.asc())
        )

    def search(self, keyword: str) -> Select:
        """Hashtags whose name contains ``keyword``, most used first."""
        return (
            select(Hashtag)
            .where(Hashtag.name.contains(keyword, autoescape=True))
            .order_by(Hashtag.usage_count.desc(), Hashtag.id.asc())
        )

    def public_posts_for(self, hashtag_id: int) -> Select:
        """Live PUBLIC posts linked to a hashtag, newest first."""
        return (
            select(Post)
            .join(PostHashtag, PostHashtag.post_id == Post.id)
            .where(
                PostHashtag.hashtag_id == hashtag_id,
                Post.deleted.is_(False),
                Post.visibility == Visibility.PUBLIC,
            )
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
