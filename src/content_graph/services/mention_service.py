"""Mention index: who was referenced, where, and by whom."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from content_graph.core.errors import InvalidInputError
from content_graph.db.pagination import Page, PageRequest, fetch_page
from content_graph.models.mention import Mention, MentionTarget
from content_graph.repositories.mention_repo import MentionRepository
from content_graph.services.directory import SqlUserDirectory, UserDirectory
from content_graph.services.references import extract_mentions

__all__ = ["MentionService", "parse_target_type"]

logger = logging.getLogger(__name__)


def parse_target_type(value: MentionTarget | str) -> MentionTarget:
    """Coerce ``value`` to a :class:`MentionTarget`."""
    if isinstance(value, MentionTarget):
        return value
    try:
        return MentionTarget(str(value).upper())
    except ValueError as exc:
        raise InvalidInputError(f"Unknown mention target type: {value!r}") from exc


class MentionService:
    """Keeps mention rows in step with the content that contains them.

    Like hashtag linking, reconciliation never commits on its own.
    """

    def __init__(self, session: Session, directory: UserDirectory | None = None) -> None:
        self.session = session
        self.directory = directory or SqlUserDirectory(session)
        self.repo = MentionRepository(session)

    def reconcile(
        self,
        target_type: MentionTarget | str,
        target_id: int,
        author_id: int,
        usernames: Iterable[str],
    ) -> list[Mention]:
        """Make the target's mention rows match the resolvable ``usernames``.

        Names that resolve to no user, or to the author, are dropped without
        error.

        Returns:
            The mention rows for the target afterwards.
        """
        target = parse_target_type(target_type)

        wanted: dict[int, None] = {}
        for name in dict.fromkeys(usernames):
            user_id = self.directory.resolve_by_display_name(name)
            if user_id is None:
                logger.debug("Skipping mention of unknown user @%s", name)
                continue
            if user_id == author_id:
                continue
            wanted[user_id] = None

        existing = {mention.user_id: mention for mention in self.repo.for_target(target, target_id)}
        removed = [mention for user_id, mention in existing.items() if user_id not in wanted]
        for mention in removed:
            self.repo.remove(mention)

        result: list[Mention] = []
        for user_id in wanted:
            mention = existing.get(user_id)
            if mention is None:
                mention = self.repo.add(
                    user_id=user_id,
                    author_id=author_id,
                    target_type=target,
                    target_id=target_id,
                )
            if mention is not None:
                result.append(mention)

        added = [user_id for user_id in wanted if user_id not in existing]
        if added or removed:
            logger.info(
                "%s %s mentions: +%s -%s",
                target.value,
                target_id,
                added,
                [mention.user_id for mention in removed],
            )
        return result

    def reconcile_content(
        self,
        target_type: MentionTarget | str,
        target_id: int,
        author_id: int,
        text: str | None,
    ) -> list[Mention]:
        """Extract @names from ``text`` and reconcile the target's mentions."""
        return self.reconcile(target_type, target_id, author_id, extract_mentions(text))

    def remove_all(self, target_type: MentionTarget | str, target_id: int) -> int:
        """Delete every mention for a target, e.g. when a comment is removed."""
        target = parse_target_type(target_type)
        removed = self.repo.remove_for_target(target, target_id)
        if removed:
            logger.info("Removed %d mentions from %s %s", removed, target.value, target_id)
        return removed

    def mentions_of(
        self,
        user_id: int,
        target_type: MentionTarget | str | None = None,
        page: int = 0,
        size: int | None = None,
    ) -> Page[Mention]:
        """Return mentions of ``user_id``, newest first."""
        target = parse_target_type(target_type) if target_type is not None else None
        return fetch_page(
            self.session,
            self.repo.of_user(user_id, target),
            PageRequest.of(page, size),
        )

    def mention_count(self, user_id: int) -> int:
        """Return how many times ``user_id`` has been mentioned."""
        return self.repo.count_for_user(user_id)
