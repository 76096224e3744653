"""Feed assembly over posts and the follow graph.

Every feed is read-only, skips soft-deleted posts and is paginated with
:class:`~content_graph.db.pagination.PageRequest`, so oversized page requests
are clamped rather than rejected.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from content_graph.db.pagination import Page, PageRequest, fetch_page
from content_graph.models.post import Post, Visibility
from content_graph.repositories.post_repo import PostRepository
from content_graph.services.directory import FollowGraph, SqlFollowGraph

__all__ = [
    "BY_LIKES",
    "BY_VIEWS",
    "FeedService",
    "NEWEST_FIRST",
]

logger = logging.getLogger(__name__)

Ordering = Sequence[ColumnElement]

# Post id breaks ties between rows created in the same instant.
NEWEST_FIRST: Ordering = (Post.created_at.desc(), Post.id.desc())
BY_LIKES: Ordering = (Post.like_count.desc(), *NEWEST_FIRST)
BY_VIEWS: Ordering = (Post.view_count.desc(), *NEWEST_FIRST)

SHARED_LEVELS = (Visibility.PUBLIC, Visibility.FOLLOWERS)


class FeedService:
    """Builds the home, explore, popular, views and recommended feeds."""

    def __init__(
        self,
        session: Session,
        follow_graph: FollowGraph | None = None,
        *,
        recommendation_order: Ordering = BY_LIKES,
    ) -> None:
        """Create the service.

        Args:
            session: Database session used for reads only.
            follow_graph: Source of follow edges; defaults to the SQL graph.
            recommendation_order: Ranking for :meth:`recommended_feed`. Swap it
                to change recommendations without touching filtering or paging.
        """
        self.session = session
        self.follow_graph = follow_graph or SqlFollowGraph(session)
        self.posts = PostRepository(session)
        self.recommendation_order = tuple(recommendation_order)

    def home_feed(
        self,
        viewer_id: int,
        include_self: bool = False,
        page: int = 0,
        size: int | None = None,
    ) -> Page[Post]:
        """Posts by accounts the viewer follows, newest first.

        Only PUBLIC and FOLLOWERS posts of followed accounts are included.
        With ``include_self`` the viewer's own posts are added at every
        visibility level.
        """
        request = PageRequest.of(page, size)
        following = self.follow_graph.following_ids_of(viewer_id) - {viewer_id}
        logger.debug(
            "Home feed for %s: following=%d include_self=%s page=%s",
            viewer_id, len(following), include_self, request,
        )

        condition: ColumnElement[bool] = and_(
            Post.author_id.in_(following),
            Post.visibility.in_(SHARED_LEVELS),
        )
        if include_self:
            condition = or_(condition, Post.author_id == viewer_id)

        stmt = self.posts.live_posts().where(condition).order_by(*NEWEST_FIRST)
        return fetch_page(self.session, stmt, request)

    def explore_feed(self, page: int = 0, size: int | None = None) -> Page[Post]:
        """All PUBLIC posts, newest first."""
        return self._public(NEWEST_FIRST, page, size)

    def popular_feed(self, page: int = 0, size: int | None = None) -> Page[Post]:
        """All PUBLIC posts, most liked first."""
        return self._public(BY_LIKES, page, size)

    def views_feed(self, page: int = 0, size: int | None = None) -> Page[Post]:
        """All PUBLIC posts, most viewed first."""
        return self._public(BY_VIEWS, page, size)

    def recommended_feed(
        self,
        viewer_id: int,
        page: int = 0,
        size: int | None = None,
    ) -> Page[Post]:
        """PUBLIC posts from accounts the viewer neither is nor follows."""
        request = PageRequest.of(page, size)
        excluded = self.follow_graph.following_ids_of(viewer_id) | {viewer_id}
        stmt = (
            self.posts.public_posts()
            .where(Post.author_id.not_in(excluded))
            .order_by(*self.recommendation_order)
        )
        return fetch_page(self.session, stmt, request)

    def _public(self, ordering: Ordering, page: int, size: int | None) -> Page[Post]:
        request = PageRequest.of(page, size)
        stmt = self.posts.public_posts().order_by(*ordering)
        return fetch_page(self.session, stmt, request)
