"""Word boundaries (UAX #29, rules WB1-WB999).

Same forward scan as the grapheme engine, with two additions the word rules
need: Extend, Format and ZWJ fold into the character before them (WB4), so
the rules look at the last two non-ignored properties; and WB6, WB7b and
WB12 peek at the next non-ignored property after the current position.
"""
from typing import Iterable, Iterator

from segkit.segment.spans import Segmentation, Span
from segkit.unicode.codepoints import CodePoint
from segkit.unicode.properties import WordBreakProperty as W, is_extended_pictographic, word_property_of

_NEWLINES = frozenset((W.NEWLINE, W.CR, W.LF))
_IGNORED = frozenset((W.EXTEND, W.FORMAT, W.ZWJ))
_AHLETTER = frozenset((W.ALETTER, W.HEBREW_LETTER))
_MIDLETTERS = frozenset((W.MIDLETTER, W.MIDNUMLET, W.SINGLE_QUOTE))
_MIDNUMS = frozenset((W.MIDNUM, W.MIDNUMLET, W.SINGLE_QUOTE))
_LEFT_OF_EXTENDNUMLET = _AHLETTER | {W.NUMERIC, W.KATAKANA, W.EXTENDNUMLET}
_RIGHT_OF_EXTENDNUMLET = _AHLETTER | {W.NUMERIC, W.KATAKANA}


def _following_table(props: list[W]) -> list[W | None]:
    """For each position, the first non-ignored property after it (None at the end).

    Built in one backward pass so the WB6, WB7b and WB12 lookahead is O(1).
    """
    following: list[W | None] = [None] * len(props)
    nxt = None
    for i in range(len(props) - 1, -1, -1):
        following[i] = nxt
        if props[i] not in _IGNORED:
            nxt = props[i]
    return following


def _breaks(props: list[W], i: int, pict: bool, p: W, pp: W | None, ri_count: int, after: W | None) -> bool:
    prev, cur = props[i - 1], props[i]
    if prev is W.CR and cur is W.LF:
        return False  # WB3
    if prev in _NEWLINES or cur in _NEWLINES:
        return True  # WB3a, WB3b
    if prev is W.ZWJ and pict:
        return False  # WB3c
    if prev is W.WSEGSPACE and cur is W.WSEGSPACE:
        return False  # WB3d
    if cur in _IGNORED:
        return False  # WB4
    if p in _AHLETTER and cur in _AHLETTER:
        return False  # WB5
    if p in _AHLETTER and cur in _MIDLETTERS and after in _AHLETTER:
        return False  # WB6
    if pp in _AHLETTER and p in _MIDLETTERS and cur in _AHLETTER:
        return False  # WB7
    if p is W.HEBREW_LETTER:
        if cur is W.SINGLE_QUOTE:
            return False  # WB7a
        if cur is W.DOUBLE_QUOTE and after is W.HEBREW_LETTER:
            return False  # WB7b
    if pp is W.HEBREW_LETTER and p is W.DOUBLE_QUOTE and cur is W.HEBREW_LETTER:
        return False  # WB7c
    if p is W.NUMERIC and cur is W.NUMERIC:
        return False  # WB8
    if p in _AHLETTER and cur is W.NUMERIC:
        return False  # WB9
    if p is W.NUMERIC and cur in _AHLETTER:
        return False  # WB10
    if pp is W.NUMERIC and p in _MIDNUMS and cur is W.NUMERIC:
        return False  # WB11
    if p is W.NUMERIC and cur in _MIDNUMS and after is W.NUMERIC:
        return False  # WB12
    if p is W.KATAKANA and cur is W.KATAKANA:
        return False  # WB13
    if p in _LEFT_OF_EXTENDNUMLET and cur is W.EXTENDNUMLET:
        return False  # WB13a
    if p is W.EXTENDNUMLET and cur in _RIGHT_OF_EXTENDNUMLET:
        return False  # WB13b
    if p is W.REGIONAL_INDICATOR and cur is W.REGIONAL_INDICATOR:
        return ri_count % 2 == 0  # WB15, WB16
    return True  # WB999


def iter_word_spans(code_points: Iterable[CodePoint]) -> Iterator[Span]:
    """Yield word-boundary spans: words, runs of spaces and single punctuation."""
    cps = list(code_points)
    if not cps:
        return
    props = [word_property_of(cp.value) for cp in cps]
    following = _following_table(props)
    # p and pp are the last two properties not folded away by WB4.
    p, pp = props[0], None
    ri_count = 1 if p is W.REGIONAL_INDICATOR else 0
    start = cps[0].offset
    for i in range(1, len(cps)):
        pict = is_extended_pictographic(cps[i].value)
        if _breaks(props, i, pict, p, pp, ri_count, following[i]):
            yield Span(start, cps[i].offset)
            start = cps[i].offset
        cur = props[i]
        if cur in _IGNORED and props[i - 1] not in _NEWLINES:
            continue
        pp, p = p, cur
        ri_count = ri_count + 1 if cur is W.REGIONAL_INDICATOR else 0
    yield Span(start, cps[-1].offset + cps[-1].length)


def segment_words(text) -> Segmentation:
    """Segment a str or UTF-8 bytes buffer at UAX #29 word boundaries."""
    return Segmentation(text, iter_word_spans)


def is_word(chunk) -> bool:
    if isinstance(chunk, bytes):
        chunk = chunk.decode("utf-8")
    return any(ch.isalnum() for ch in chunk)


def unicode_words(text) -> list:
    """Return the word segments of text that contain a letter or digit.

    >>> unicode_words("The quick (\\"brown\\") fox can't jump 32.3 feet, right?")
    ['The', 'quick', 'brown', 'fox', "can't", 'jump', '32.3', 'feet', 'right']
    """
    return [chunk for chunk in segment_words(text).texts() if is_word(chunk)]
