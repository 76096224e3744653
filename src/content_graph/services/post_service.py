"""Content store: post lifecycle and per-post counters.

Creating, editing and deleting a post re-derives its hashtag and mention
links in the same transaction as the post change itself.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from content_graph.core.errors import (
    AuthorNotFoundError,
    ForbiddenError,
    InvalidInputError,
    PostNotFoundError,
    UserNotFoundError,
)
from content_graph.core.settings import settings
from content_graph.db.pagination import Page, PageRequest, fetch_page
from content_graph.db.session import unit_of_work
from content_graph.db.time import utcnow
from content_graph.models.hashtag import Hashtag
from content_graph.models.mention import MentionTarget
from content_graph.models.post import Post, Visibility
from content_graph.repositories.post_repo import COUNTER_COLUMNS, PostRepository
from content_graph.services.directory import (
    FollowGraph,
    SqlFollowGraph,
    SqlUserDirectory,
    UserDirectory,
)
from content_graph.services.hashtag_service import HashtagService
from content_graph.services.mention_service import MentionService
from content_graph.services.references import extract_references
from content_graph.services.visibility import VisibilityPolicy

__all__ = ["PostService", "parse_visibility"]

logger = logging.getLogger(__name__)


def parse_visibility(value: Visibility | str) -> Visibility:
    """Coerce ``value`` to a :class:`Visibility`.

    Raises:
        InvalidInputError: If ``value`` names no visibility level.
    """
    if isinstance(value, Visibility):
        return value
    try:
        return Visibility(str(value).upper())
    except ValueError as exc:
        raise InvalidInputError(f"Unknown visibility: {value!r}") from exc


def _resolve_counter(name: str) -> str:
    if name in COUNTER_COLUMNS:
        return COUNTER_COLUMNS[name]
    if name in COUNTER_COLUMNS.values():
        return name
    raise InvalidInputError(f"Unknown counter: {name!r}")


class PostService:
    """Owns post rows and the three denormalized post counters."""

    def __init__(
        self,
        session: Session,
        *,
        directory: UserDirectory | None = None,
        follow_graph: FollowGraph | None = None,
    ) -> None:
        self.session = session
        self.directory = directory or SqlUserDirectory(session)
        self.follow_graph = follow_graph or SqlFollowGraph(session)
        self.posts = PostRepository(session)
        self.hashtags = HashtagService(session)
        self.mentions = MentionService(session, self.directory)
        self.policy = VisibilityPolicy(self.follow_graph)

    def create_post(
        self,
        author_id: int,
        content: str,
        visibility: Visibility | str = Visibility.PUBLIC,
    ) -> Post:
        """Persist a post and link its hashtags and mentions.

        Raises:
            AuthorNotFoundError: If ``author_id`` is not a known user.
            InvalidInputError: If the content is too long or the visibility
                is malformed.
        """
        self._check_content(content)
        level = parse_visibility(visibility)

        with unit_of_work(self.session):
            if not self.directory.exists(author_id):
                raise AuthorNotFoundError(author_id)
            post = self.posts.create(author_id=author_id, content=content, visibility=level)
            self._relink(post, content)

        logger.info("Post %s created by user %s", post.id, author_id)
        return post

    def edit_post(
        self,
        editor_id: int,
        post_id: int,
        content: str | None = None,
        visibility: Visibility | str | None = None,
    ) -> Post:
        """Apply a partial update; only arguments that are not None change.

        A content change re-derives every hashtag and mention link, removing
        ones the new text no longer contains.

        Raises:
            PostNotFoundError: If the post is missing or soft-deleted.
            ForbiddenError: If ``editor_id`` is not the author.
            InvalidInputError: For over-long content or a malformed visibility.
        """
        if content is not None:
            self._check_content(content)
        level = parse_visibility(visibility) if visibility is not None else None

        with unit_of_work(self.session):
            post = self._owned_post(editor_id, post_id, action="edit")
            if content is not None:
                post.content = content
                self._relink(post, content)
            if level is not None:
                post.visibility = level
            post.updated_at = utcnow()
            self.session.flush()

        logger.info("Post %s edited by user %s", post_id, editor_id)
        return post

    def soft_delete_post(self, requester_id: int, post_id: int) -> None:
        """Flag a post as deleted and drop all of its links.

        The row and its counters stay in place. Hashtag usage is decremented
        as if the content had become empty.

        Raises:
            PostNotFoundError: If the post is missing or already deleted.
            ForbiddenError: If ``requester_id`` is not the author.
        """
        with unit_of_work(self.session):
            post = self._owned_post(requester_id, post_id, action="delete")
            post.deleted = True
            post.updated_at = utcnow()
            self._relink(post, "")

        logger.info("Post %s soft-deleted by user %s", post_id, requester_id)

    def get_post(self, viewer_id: int | None, post_id: int) -> Post:
        """Return a post the viewer may read and count the view.

        Views by the author are not counted. ``viewer_id`` None is an
        anonymous viewer.

        Raises:
            PostNotFoundError: If the post is missing or soft-deleted.
            ForbiddenError: If the visibility policy denies the viewer.
        """
        with unit_of_work(self.session):
            post = self._visible_post(viewer_id, post_id)
            if viewer_id != post.author_id:
                self.posts.adjust_counter(post_id, "view_count", 1)
        return post

    def hashtags_of_post(self, viewer_id: int | None, post_id: int) -> list[Hashtag]:
        """Return the hashtags of a post the viewer may read. No view is counted.

        Raises:
            PostNotFoundError: If the post is missing or soft-deleted.
            ForbiddenError: If the visibility policy denies the viewer.
        """
        self._visible_post(viewer_id, post_id)
        return self.hashtags.hashtags_of_post(post_id)

    def adjust_counter(self, post_id: int, counter: str, delta: int) -> bool:
        """Atomically add ``delta`` to a post counter.

        Used by the like and comment subsystems. A decrement that would go
        below zero is skipped rather than reported.

        Args:
            post_id: Target post; soft-deleted posts are still counted.
            counter: ``views``, ``likes`` or ``comments`` (or the column name).
            delta: Signed amount to add.

        Returns:
            True if the counter changed.
        """
        column = _resolve_counter(counter)
        with unit_of_work(self.session):
            if self.posts.get_by_id(post_id) is None:
                raise PostNotFoundError(post_id)
            applied = self.posts.adjust_counter(post_id, column, delta)
        if not applied:
            logger.warning(
                "Post %s %s not moved by %+d; would go below zero", post_id, column, delta
            )
        return applied

    def list_posts_by_author(
        self,
        viewer_id: int | None,
        author_id: int,
        page: int = 0,
        size: int | None = None,
    ) -> Page[Post]:
        """Return an author's live posts the viewer may read, newest first.

        Raises:
            UserNotFoundError: If ``author_id`` is not a known user.
        """
        if not self.directory.exists(author_id):
            raise UserNotFoundError(author_id)
        levels = self.policy.visible_levels(viewer_id, author_id)
        stmt = (
            self.posts.live_posts()
            .where(Post.author_id == author_id, Post.visibility.in_(levels))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return fetch_page(self.session, stmt, PageRequest.of(page, size))

    def _visible_post(self, viewer_id: int | None, post_id: int) -> Post:
        post = self.posts.get_live(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        if not self.policy.can_view(viewer_id, post):
            raise ForbiddenError(f"User {viewer_id} may not view post {post_id}")
        return post

    def _owned_post(self, user_id: int, post_id: int, *, action: str) -> Post:
        post = self.posts.get_live(post_id, for_update=True)
        if post is None:
            raise PostNotFoundError(post_id)
        if post.author_id != user_id:
            raise ForbiddenError(f"User {user_id} may not {action} post {post_id}")
        return post

    def _relink(self, post: Post, content: str) -> None:
        refs = extract_references(content)
        self.hashtags.reconcile(post.id, refs.hashtags)
        self.mentions.reconcile(MentionTarget.POST, post.id, post.author_id, refs.mentions)

    @staticmethod
    def _check_content(content: str | None) -> None:
        if content is None:
            raise InvalidInputError("Post content is required")
        if len(content) > settings.max_content_length:
            raise InvalidInputError(
                f"Post content exceeds {settings.max_content_length} characters"
            )
