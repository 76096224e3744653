"""Tests for hashtag and mention extraction."""

from content_graph.services.references import (
    References,
    extract_hashtags,
    extract_mentions,
    extract_references,
    normalize_hashtag,
)


def test_hashtags_are_lowercased_and_deduplicated() -> None:
    assert extract_hashtags("great #Food day with @alice and #food") == ["food"]


def test_hashtags_keep_first_seen_order() -> None:
    assert extract_hashtags("#b #a #B #c") == ["b", "a", "c"]


def test_mentions_preserve_case() -> None:
    assert extract_mentions("thanks @Alice and @bob, also @Alice") == ["Alice", "bob"]


def test_unicode_word_characters_are_tokens() -> None:
    assert extract_hashtags("#café #東京 #snake_case") == ["café", "東京", "snake_case"]


def test_token_stops_at_punctuation() -> None:
    assert extract_hashtags("#food! #fun-times") == ["food", "fun"]
    assert extract_mentions("(@alice)") == ["alice"]


def test_bare_sigils_are_ignored() -> None:
    assert extract_hashtags("# @ ## spacing") == []
    assert extract_mentions("mail me @ home") == []


def test_empty_and_none_text() -> None:
    assert extract_hashtags("") == []
    assert extract_hashtags(None) == []
    assert extract_mentions(None) == []
    assert extract_references(None) == References()


def test_overlong_tokens_are_dropped() -> None:
    text = f"#{'a' * 11} #short"
    assert extract_hashtags(text, max_length=10) == ["short"]


def test_extract_references_collects_both_kinds() -> None:
    refs = extract_references("great #food day with @alice and #food")
    assert refs.hashtags == ("food",)
    assert refs.mentions == ("alice",)


def test_normalize_hashtag() -> None:
    assert normalize_hashtag("  #Food ") == "food"
    assert normalize_hashtag("##x") == "x"
