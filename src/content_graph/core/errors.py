"""Error taxonomy for the content graph engine.

Every failure surfaced to callers belongs to exactly one stable ``kind``.
Message text is informational only; callers branch on the class or ``kind``.
"""

from __future__ import annotations


class ContentGraphError(RuntimeError):
    """Base exception for all engine failures."""

    kind = "error"


class NotFoundError(ContentGraphError):
    """Raised when a post, hashtag, user or author is absent or soft-deleted."""

    kind = "not_found"


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist or has been soft-deleted."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


class AuthorNotFoundError(NotFoundError):
    """Raised when the author of a new post cannot be resolved."""

    def __init__(self, author_id: int) -> None:
        super().__init__(f"Author not found: {author_id}")
        self.author_id = author_id


class UserNotFoundError(NotFoundError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class HashtagNotFoundError(NotFoundError):
    """Raised when a hashtag lookup by name finds nothing."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Hashtag not found: #{name}")
        self.name = name


class ForbiddenError(ContentGraphError):
    """Raised when visibility or ownership rules deny the caller."""

    kind = "forbidden"


class InvalidInputError(ContentGraphError):
    """Raised for content over the length bound or malformed enum values."""

    kind = "invalid_input"


class ConflictError(ContentGraphError):
    """Raised when a unique-constraint race survives the internal retry."""

    kind = "conflict"


__all__ = [
    "AuthorNotFoundError",
    "ConflictError",
    "ContentGraphError",
    "ForbiddenError",
    "HashtagNotFoundError",
    "InvalidInputError",
    "NotFoundError",
    "PostNotFoundError",
    "UserNotFoundError",
]
