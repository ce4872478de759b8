"""Sentence boundaries (UAX #29, rules SB1-SB998)."""
from typing import Iterable, Iterator

from segkit.segment.spans import Segmentation, Span
from segkit.unicode.codepoints import CodePoint
from segkit.unicode.properties import SentenceBreakProperty as S, sentence_property_of

_PARA_SEP = frozenset((S.SEP, S.CR, S.LF))
_IGNORED = frozenset((S.EXTEND, S.FORMAT))
_SATERM = frozenset((S.STERM, S.ATERM))
_CASED = frozenset((S.UPPER, S.LOWER))
# Everything SB8 may not skip over while looking for a lowercase letter.
_SB8_STOP = frozenset((S.OLETTER, S.UPPER, S.LOWER)) | _PARA_SEP | _SATERM


def _lower_ahead_table(props: list[S]) -> list[bool]:
    """For each position, whether a Lower is reached from there before an SB8 stop.

    One backward pass, so the SB8 check at each position is O(1).
    """
    ahead = [False] * (len(props) + 1)
    for i in range(len(props) - 1, -1, -1):
        prop = props[i]
        if prop is S.LOWER:
            ahead[i] = True
        elif prop not in _SB8_STOP:
            ahead[i] = ahead[i + 1]
    return ahead


class _Tail:
    """Tracks an open ``SATerm Close* Sp*`` sequence ending at the scan position."""

    __slots__ = ("term", "spaces")

    def __init__(self):
        self.term = None
        self.spaces = False

    def push(self, prop: S) -> None:
        if prop in _SATERM:
            self.term, self.spaces = prop, False
        elif self.term is not None and prop is S.CLOSE and not self.spaces:
            pass
        elif self.term is not None and prop is S.SP:
            self.spaces = True
        else:
            self.term = None


def _breaks(props: list[S], i: int, p: S, pp: S | None, tail: _Tail, lower_ahead: bool) -> bool:
    prev, cur = props[i - 1], props[i]
    if prev is S.CR and cur is S.LF:
        return False  # SB3
    if prev in _PARA_SEP:
        return True  # SB4
    if cur in _IGNORED:
        return False  # SB5
    if p is S.ATERM and cur is S.NUMERIC:
        return False  # SB6
    if p is S.ATERM and pp in _CASED and cur is S.UPPER:
        return False  # SB7
    if tail.term is None:
        return False  # SB998
    if tail.term is S.ATERM and lower_ahead:
        return False  # SB8
    if cur is S.SCONTINUE or cur in _SATERM:
        return False  # SB8a
    if not tail.spaces and (cur is S.CLOSE or cur is S.SP or cur in _PARA_SEP):
        return False  # SB9
    if cur is S.SP or cur in _PARA_SEP:
        return False  # SB10
    return True  # SB11


def iter_sentence_spans(code_points: Iterable[CodePoint]) -> Iterator[Span]:
    """Yield sentence spans; each keeps its trailing spaces and paragraph separator."""
    cps = list(code_points)
    if not cps:
        return
    props = [sentence_property_of(cp.value) for cp in cps]
    lower_ahead = _lower_ahead_table(props)
    p, pp = props[0], None
    tail = _Tail()
    tail.push(p)
    start = cps[0].offset
    for i in range(1, len(cps)):
        if _breaks(props, i, p, pp, tail, lower_ahead[i]):
            yield Span(start, cps[i].offset)
            start = cps[i].offset
        cur = props[i]
        if cur in _IGNORED and props[i - 1] not in _PARA_SEP:
            continue
        tail.push(cur)
        pp, p = p, cur
    yield Span(start, cps[-1].offset + cps[-1].length)


def segment_sentences(text) -> Segmentation:
    """Segment a str or UTF-8 bytes buffer at UAX #29 sentence boundaries."""
    return Segmentation(text, iter_sentence_spans)


def sentences(text) -> list:
    """Return the sentences of text as substrings (or byte slices).

    >>> sentences("This is a test. It works.")
    ['This is a test. ', 'It works.']
    """
    return list(segment_sentences(text).texts())
