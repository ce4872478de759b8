"""Grapheme helpers. Counting, slicing and truncation respect cluster boundaries."""
from segkit.segment.grapheme import graphemes, segment_graphemes
from segkit.segment.word import unicode_words


def split_into_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    if not text:
        return []
    return graphemes(text)


def split_into_words(text: str) -> list[str]:
    """Split into words at UAX #29 word boundaries, dropping spaces and punctuation."""
    if not text:
        return []
    return unicode_words(text)


def grapheme_length(text: str) -> int:
    """Number of user-perceived characters in text."""
    return sum(1 for _ in segment_graphemes(text))


def grapheme_substr(text: str, start: int | None = None, stop: int | None = None) -> str:
    """Like text[start:stop], with start and stop counted in grapheme clusters."""
    clusters = split_into_graphemes(text)
    return "".join(clusters[start:stop])


def truncate_graphemes(text: str, limit: int, ellipsis: str = "") -> str:
    """Cut text to at most limit clusters, never splitting one.

    When text is cut, ellipsis is appended and counts toward the limit.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    clusters = split_into_graphemes(text)
    if len(clusters) <= limit:
        return text
    keep = max(limit - grapheme_length(ellipsis), 0)
    return "".join(clusters[:keep]) + ellipsis
