"""Read-only access to the user directory and the follow graph.

Both are owned by other subsystems. The engine depends on the protocols; the
SQL implementations read the ``app_user`` and ``follow`` tables.
"""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from content_graph.models import Follow, User

__all__ = ["FollowGraph", "SqlFollowGraph", "SqlUserDirectory", "UserDirectory"]


class UserDirectory(Protocol):
    """Resolves user identities."""

    def resolve_by_display_name(self, name: str) -> int | None: ...

    def exists(self, user_id: int) -> bool: ...


class FollowGraph(Protocol):
    """Directed follower → followee edges."""

    def following_ids_of(self, user_id: int) -> set[int]: ...

    def is_following(self, follower_id: int, followee_id: int) -> bool: ...


class SqlUserDirectory:
    """User directory backed by the ``app_user`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve_by_display_name(self, name: str) -> int | None:
        return self.session.execute(
            select(User.id).where(User.display_name == name)
        ).scalar_one_or_none()

    def exists(self, user_id: int) -> bool:
        return self.session.get(User, user_id) is not None


class SqlFollowGraph:
    """Follow graph backed by the ``follow`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def following_ids_of(self, user_id: int) -> set[int]:
        return set(
            self.session.execute(
                select(Follow.followee_id).where(Follow.follower_id == user_id)
            ).scalars()
        )

    def is_following(self, follower_id: int, followee_id: int) -> bool:
        return self.session.execute(
            select(Follow.id).where(
                Follow.follower_id == follower_id,
                Follow.followee_id == followee_id,
            )
        ).first() is not None
