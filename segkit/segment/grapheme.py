"""Extended grapheme cluster boundaries (UAX #29, rules GB1-GB999).

The engine is a single forward pass. Everything it needs to remember about
code points before the current pair lives in a RuleState value that each
step takes and returns, so the scan never looks back and never looks ahead.
"""
from typing import Iterable, Iterator, NamedTuple

from segkit.segment.spans import Segmentation, Span
from segkit.unicode.codepoints import CodePoint
from segkit.unicode.properties import BreakProperty as P, ConjunctBreak as C, conjunct_property_of, property_of

_CONTROLS = frozenset((P.CONTROL, P.CR, P.LF))
_EXTENDERS = frozenset((P.EXTEND, P.ZWJ))
# Only these cluster break values carry an Indic_Conjunct_Break value.
_CONJUNCT_CARRIERS = frozenset((P.OTHER, P.EXTEND, P.ZWJ))

# GB6-GB8: Hangul syllable sequences that stay together.
_HANGUL = {
    P.L: frozenset((P.L, P.V, P.LV, P.LVT)),
    P.LV: frozenset((P.V, P.T)),
    P.V: frozenset((P.V, P.T)),
    P.LVT: frozenset((P.T,)),
    P.T: frozenset((P.T,)),
}


class RuleState(NamedTuple):
    """What the engine knows about the code points already scanned.

    ri_count counts the Regional_Indicators ending at previous, pictographic
    is set while previous ends an ExtPict Extend* run, and pictographic_zwj
    is set when previous is a ZWJ closing such a run. conjunct is set while
    previous ends an InCB ``Consonant [Extend Linker]*`` run, and
    conjunct_linked once that run contains a Linker.
    """

    previous: P | None = None
    ri_count: int = 0
    pictographic: bool = False
    pictographic_zwj: bool = False
    conjunct: bool = False
    conjunct_linked: bool = False


def _advance(state: RuleState, prop: P, incb: C = C.NONE) -> RuleState:
    if incb is C.CONSONANT:
        conjunct, linked = True, False
    elif state.conjunct and incb is C.LINKER:
        conjunct, linked = True, True
    elif state.conjunct and incb is C.EXTEND:
        conjunct, linked = True, state.conjunct_linked
    else:
        conjunct, linked = False, False
    return RuleState(
        previous=prop,
        ri_count=state.ri_count + 1 if prop is P.REGIONAL_INDICATOR else 0,
        pictographic=prop is P.EXTENDED_PICTOGRAPHIC or (prop is P.EXTEND and state.pictographic),
        pictographic_zwj=prop is P.ZWJ and state.pictographic,
        conjunct=conjunct,
        conjunct_linked=linked,
    )


def start_state(first: P, conjunct: C = C.NONE) -> RuleState:
    """State after the first code point of a run (GB1)."""
    return _advance(RuleState(), first, conjunct)


def _breaks(state: RuleState, prev: P, nxt: P, nxt_incb: C) -> bool:
    if prev is P.CR and nxt is P.LF:
        return False  # GB3
    if prev in _CONTROLS or nxt in _CONTROLS:
        return True  # GB4, GB5
    if nxt in _HANGUL.get(prev, ()):
        return False  # GB6-GB8
    if nxt in _EXTENDERS or nxt is P.SPACING_MARK:
        return False  # GB9, GB9a
    if prev is P.PREPEND:
        return False  # GB9b
    if nxt_incb is C.CONSONANT and state.conjunct_linked:
        return False  # GB9c
    if prev is P.ZWJ and nxt is P.EXTENDED_PICTOGRAPHIC and state.pictographic_zwj:
        return False  # GB11
    if prev is P.REGIONAL_INDICATOR and nxt is P.REGIONAL_INDICATOR:
        return state.ri_count % 2 == 0  # GB12, GB13
    return True  # GB999


def is_boundary(
    state: RuleState,
    previous_property: P,
    next_property: P,
    next_conjunct: C = C.NONE,
) -> tuple[bool, RuleState]:
    """Decide whether a cluster boundary falls between two adjacent code points.

    next_conjunct is the Indic_Conjunct_Break value of the next code point;
    leaving it at NONE disables GB9c. Returns the decision and the state to
    pass to the next step.
    """
    brk = _breaks(state, previous_property, next_property, next_conjunct)
    return brk, _advance(state, next_property, next_conjunct)


def iter_grapheme_spans(code_points: Iterable[CodePoint]) -> Iterator[Span]:
    """Yield one Span per extended grapheme cluster, left to right."""
    state = None
    start = end = 0
    for cp in code_points:
        prop = property_of(cp.value)
        incb = conjunct_property_of(cp.value) if prop in _CONJUNCT_CARRIERS else C.NONE
        if state is None:
            state = start_state(prop, incb)
            start = cp.offset
        else:
            brk, state = is_boundary(state, state.previous, prop, incb)
            if brk:
                yield Span(start, cp.offset)
                start = cp.offset
        end = cp.offset + cp.length
    if state is not None:
        yield Span(start, end)  # GB2


def segment_graphemes(text) -> Segmentation:
    """Segment a str or UTF-8 bytes buffer into grapheme cluster spans.

    >>> list(segment_graphemes("abc"))
    [Span(start=0, end=1), Span(start=1, end=2), Span(start=2, end=3)]
    """
    return Segmentation(text, iter_grapheme_spans)


def graphemes(text) -> list:
    """Return the grapheme clusters of text as substrings (or byte slices)."""
    return list(segment_graphemes(text).texts())


def grapheme_indices(text) -> list[tuple[int, str | bytes]]:
    """Return (offset, cluster) pairs."""
    seg = segment_graphemes(text)
    return [(span.start, chunk) for span, chunk in zip(seg, seg.texts())]
