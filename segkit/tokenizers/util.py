"""Span utilities shared by the tokenizers."""
from typing import Iterable, Iterator

import regex

from segkit.errors import MismatchError

# Code point ranges treated as CJK (Hangul Jamo through CJK Ext. B planes).
CJK_RANGES = (
    (4352, 4607),
    (11904, 42191),
    (43072, 43135),
    (44032, 55215),
    (63744, 64255),
    (65072, 65103),
    (65381, 65500),
    (131072, 196607),
)

_XML_ESCAPES = (
    ("&", "&amp;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
    ("|", "&#124;"),
    ("[", "&#91;"),
    ("]", "&#93;"),
    ("<", "&lt;"),
)


def string_span_tokenize(s: str, sep: str) -> Iterator[tuple[int, int]]:
    """Yield token offsets in s by splitting at each occurrence of sep.

    >>> s = "Good muffins cost $3.88\\nin New York.  Please buy me\\ntwo of them.\\n\\nThanks."
    >>> list(string_span_tokenize(s, " "))[:7]
    [(0, 4), (5, 12), (13, 17), (18, 26), (27, 30), (31, 36), (37, 37)]
    """
    if not sep:
        raise ValueError("Token delimiter must not be empty")
    left = 0
    while True:
        right = s.find(sep, left)
        if right == -1:
            if left != len(s):
                yield left, len(s)
            break
        if right != 0:
            yield left, right
        left = right + len(sep)


def regexp_span_tokenize(s: str, pattern: str) -> Iterator[tuple[int, int]]:
    """Yield token offsets in s by splitting at each match of pattern."""
    left = 0
    for m in regex.finditer(pattern, s):
        right, following = m.span()
        if right != left:
            yield left, right
        left = following
    yield left, len(s)


def spans_to_relative(spans: Iterable[tuple[int, int]]) -> Iterator[tuple[int, int]]:
    """Yield (gap, length) pairs relative to the end of the previous span.

    Empty spans carry no token and are skipped.
    """
    prev = 0
    for left, right in spans:
        if left == right:
            continue
        yield left - prev, right - left
        prev = right


def align_tokens(tokens: Iterable[str], sentence: str) -> list[tuple[int, int]]:
    """Find the (start, end) offsets of tokens in sentence, in order.

    >>> align_tokens(["Hello", "World"], "Hello World")
    [(0, 5), (6, 11)]
    """
    point = 0
    offsets = []
    for token in tokens:
        start = sentence.find(token, point)
        if start == -1:
            raise MismatchError(f"substring {token!r} not found in {sentence!r}")
        point = start + len(token)
        offsets.append((start, point))
    return offsets


def is_cjk(character: str) -> bool:
    cp = ord(character)
    return any(start <= cp <= end for start, end in CJK_RANGES)


def xml_escape(text: str) -> str:
    """Escape characters that are unsafe in XML (and in bracketed tree notation)."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def xml_unescape(text: str) -> str:
    # "&amp;" last, so "&amp;lt;" becomes "&lt;" and not "<".
    for char, entity in reversed(_XML_ESCAPES):
        text = text.replace(entity, char)
    return text
