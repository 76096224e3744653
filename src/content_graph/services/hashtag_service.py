"""Hashtag index: identity, usage counters and post links."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from content_graph.core.errors import ConflictError, HashtagNotFoundError, InvalidInputError
from content_graph.core.settings import settings
from content_graph.db.pagination import Page, PageRequest, fetch_page
from content_graph.models.hashtag import HASHTAG_NAME_MAX_LENGTH, Hashtag
from content_graph.models.post import Post
from content_graph.repositories.hashtag_repo import HashtagRepository
from content_graph.services.references import normalize_hashtag

__all__ = ["HashtagService"]

logger = logging.getLogger(__name__)

# One extra insert after the first unique-name conflict.
_CREATE_ATTEMPTS = 2


class HashtagService:
    """Owns hashtag rows and keeps ``usage_count`` equal to the live link count.

    Mutating methods do not commit. They run inside the caller's unit of work
    so a post edit and its re-linking succeed or fail together.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repo = HashtagRepository(session)

    def get_or_create(self, name: str) -> Hashtag:
        """Return the hashtag called ``name``, creating it with zero usage.

        Two writers may race to create the same name. The loser's insert hits
        the unique constraint, after which the winner's row is read back; if
        that still finds nothing the insert is tried once more.

        Raises:
            InvalidInputError: If the normalized name is empty or too long.
            ConflictError: If creation keeps conflicting after the retry.
        """
        normalized = normalize_hashtag(name)
        if not normalized or len(normalized) > HASHTAG_NAME_MAX_LENGTH:
            raise InvalidInputError(f"Invalid hashtag name: {name!r}")

        existing = self.repo.get_by_name(normalized)
        if existing is not None:
            return existing

        for attempt in range(1, _CREATE_ATTEMPTS + 1):
            try:
                hashtag = self.repo.insert(normalized)
            except IntegrityError:
                logger.warning(
                    "Hashtag #%s created concurrently (attempt %d)", normalized, attempt
                )
                existing = self.repo.get_by_name(normalized)
                if existing is not None:
                    return existing
                continue
            logger.info("Created hashtag #%s", normalized)
            return hashtag

        raise ConflictError(f"Could not create hashtag #{normalized}")

    def reconcile(self, post_id: int, names: Iterable[str]) -> list[Hashtag]:
        """Make the post's links equal exactly the given hashtag names.

        Only the difference is applied: links for names no longer present are
        deleted and their usage decremented, links for new names are inserted
        and their usage incremented. Each counter moves once per link actually
        written or removed.

        Returns:
            The hashtags linked to the post afterwards, in ``names`` order.
        """
        wanted: dict[str, None] = {}
        for raw in names:
            name = normalize_hashtag(raw)
            if name and len(name) <= HASHTAG_NAME_MAX_LENGTH:
                wanted[name] = None

        current = {link.hashtag.name: link.hashtag for link in self.repo.links_for_post(post_id)}

        removed = [hashtag for name, hashtag in current.items() if name not in wanted]
        for hashtag in removed:
            if not self.repo.remove_link(post_id, hashtag.id):
                continue
            if not self.repo.adjust_usage(hashtag.id, -1):
                logger.warning("Usage of #%s already at zero; not decremented", hashtag.name)

        linked: dict[str, Hashtag] = {}
        for name in wanted:
            if name in current:
                linked[name] = current[name]
                continue
            hashtag = self.get_or_create(name)
            if self.repo.add_link(post_id, hashtag.id):
                self.repo.adjust_usage(hashtag.id, 1)
            linked[name] = hashtag

        added = [name for name in wanted if name not in current]
        if added or removed:
            logger.info(
                "Post %s hashtags: +%s -%s",
                post_id,
                added,
                [hashtag.name for hashtag in removed],
            )
        self.session.flush()
        return list(linked.values())

    # Reads

    def get_hashtag(self, name: str) -> Hashtag:
        """Return a hashtag by name (``#`` prefix and case are ignored)."""
        normalized = normalize_hashtag(name)
        hashtag = self.repo.get_by_name(normalized)
        if hashtag is None:
            raise HashtagNotFoundError(normalized)
        return hashtag

    def trending(self, page: int = 0, size: int | None = None) -> Page[Hashtag]:
        """Return hashtags in use ordered by usage, ties broken by id."""
        return fetch_page(self.session, self.repo.trending(), PageRequest.of(page, size))

    def top_trending(self, limit: int | None = None) -> list[Hashtag]:
        """Return the ``limit`` most used hashtags."""
        limit = settings.trending_default_limit if limit is None else limit
        return self.trending(0, limit).items

    def search(self, keyword: str, page: int = 0, size: int | None = None) -> Page[Hashtag]:
        """Return hashtags whose name contains ``keyword``, most used first."""
        return fetch_page(
            self.session,
            self.repo.search(normalize_hashtag(keyword)),
            PageRequest.of(page, size),
        )

    def posts_by_hashtag(self, name: str, page: int = 0, size: int | None = None) -> Page[Post]:
        """Return live PUBLIC posts tagged ``name``, newest first."""
        hashtag = self.get_hashtag(name)
        return fetch_page(
            self.session,
            self.repo.public_posts_for(hashtag.id),
            PageRequest.of(page, size),
        )

    def hashtags_of_post(self, post_id: int) -> list[Hashtag]:
        """Return the hashtags currently linked to a post."""
        return [link.hashtag for link in self.repo.links_for_post(post_id)]
