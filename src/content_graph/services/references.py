"""Extraction of #hashtag and @mention tokens from free text.

Both token kinds are a sigil followed by one or more word characters (letters
of any script, digits, underscore). Hashtags are lower-cased; mentions keep
their case because they are matched against display names as written.
Results are de-duplicated on the normalized value in first-seen order.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from content_graph.core.settings import settings

__all__ = [
    "References",
    "extract_hashtags",
    "extract_mentions",
    "extract_references",
    "normalize_hashtag",
]

# str patterns make \w Unicode-aware.
HASHTAG_PATTERN = re.compile(r"#(\w+)")
MENTION_PATTERN = re.compile(r"@(\w+)")


@dataclass(frozen=True)
class References:
    """Tokens extracted from one piece of content."""

    hashtags: tuple[str, ...] = ()
    mentions: tuple[str, ...] = ()


def normalize_hashtag(name: str) -> str:
    """Return the canonical stored form of a hashtag name."""
    return name.strip().lstrip("#").lower()


def _extract(
    text: str | None,
    pattern: re.Pattern[str],
    normalize: Callable[[str], str],
    max_length: int,
) -> list[str]:
    if not text:
        return []
    seen: set[str] = set()
    tokens: list[str] = []
    for match in pattern.finditer(text):
        token = normalize(match.group(1))
        if len(token) > max_length or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


def extract_hashtags(text: str | None, max_length: int | None = None) -> list[str]:
    """Return the distinct lower-cased hashtags in ``text``.

    Example:
        >>> extract_hashtags("great #Food day with #food and #fun")
        ['food', 'fun']
    """
    limit = settings.max_token_length if max_length is None else max_length
    return _extract(text, HASHTAG_PATTERN, str.lower, limit)


def extract_mentions(text: str | None, max_length: int | None = None) -> list[str]:
    """Return the distinct @names in ``text`` with their case preserved."""
    limit = settings.max_token_length if max_length is None else max_length
    return _extract(text, MENTION_PATTERN, str, limit)


def extract_references(text: str | None) -> References:
    """Extract both hashtags and mentions from ``text``."""
    return References(
        hashtags=tuple(extract_hashtags(text)),
        mentions=tuple(extract_mentions(text)),
    )
