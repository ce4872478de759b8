"""Unicode break property tables for UAX #29 segmentation.

Each table maps the whole code space to one property value. Tables are
derived from the Unicode character database bundled with the ``regex``
library: one ``finditer`` pass over a string holding every code point yields
the maximal runs of each property value, which become a sorted range table
searched with ``bisect``. A table is built on first use, once per process,
and never mutated afterwards.
"""
import logging
import threading
import time
from bisect import bisect_right
from enum import Enum
from importlib import metadata
from typing import Iterator

import regex

logger = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF

# UAX #29 rule revision the boundary engines implement (GB9c needs 15.1 data).
RULES_VERSION = "15.1.0"

# A code point first assigned in each version, used to date the regex database.
_VERSION_SENTINELS = (
    ("15.0.0", (0x11F00,)),  # Kawi
    ("15.1.0", (0x2EBF0,)),  # CJK Unified Ideographs Extension I
    ("16.0.0", (0x1CC00, 0x10D40)),  # Legacy Computing Supplement, Garay
    ("17.0.0", (0x10940, 0x323B0)),  # Sidetic, CJK Unified Ideographs Extension J
)


def version_tuple(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


def detect_data_version() -> str | None:
    """Newest version whose sentinel code points regex reports as assigned."""
    assigned = regex.compile(r"\p{Assigned}")
    found = None
    for version, code_points in _VERSION_SENTINELS:
        if any(assigned.match(chr(cp)) for cp in code_points):
            found = version
    return found


def _data_version() -> str:
    """Unicode version of the character database bundled with the installed regex."""
    try:
        description = metadata.metadata("regex").json.get("description", "")
    except metadata.PackageNotFoundError:
        description = ""
    m = regex.search(r"supports Unicode (\d+\.\d+\.\d+)", description)
    if m:
        return m.group(1)
    detected = detect_data_version()
    if detected is None:
        raise RuntimeError("the installed regex release predates Unicode 15.0")
    return detected


# Version of the property data every table is built from.
UNICODE_VERSION = _data_version()


class BreakProperty(Enum):
    """Grapheme_Cluster_Break values, with Extended_Pictographic folded in."""

    CR = "CR"
    LF = "LF"
    CONTROL = "Control"
    EXTEND = "Extend"
    ZWJ = "ZWJ"
    REGIONAL_INDICATOR = "Regional_Indicator"
    PREPEND = "Prepend"
    SPACING_MARK = "SpacingMark"
    L = "L"
    V = "V"
    T = "T"
    LV = "LV"
    LVT = "LVT"
    EXTENDED_PICTOGRAPHIC = "Extended_Pictographic"
    OTHER = "Other"


class WordBreakProperty(Enum):
    CR = "CR"
    LF = "LF"
    NEWLINE = "Newline"
    EXTEND = "Extend"
    ZWJ = "ZWJ"
    REGIONAL_INDICATOR = "Regional_Indicator"
    FORMAT = "Format"
    KATAKANA = "Katakana"
    HEBREW_LETTER = "Hebrew_Letter"
    ALETTER = "ALetter"
    SINGLE_QUOTE = "Single_Quote"
    DOUBLE_QUOTE = "Double_Quote"
    MIDNUMLET = "MidNumLet"
    MIDLETTER = "MidLetter"
    MIDNUM = "MidNum"
    NUMERIC = "Numeric"
    EXTENDNUMLET = "ExtendNumLet"
    WSEGSPACE = "WSegSpace"
    OTHER = "Other"


class SentenceBreakProperty(Enum):
    CR = "CR"
    LF = "LF"
    EXTEND = "Extend"
    SEP = "Sep"
    FORMAT = "Format"
    SP = "Sp"
    LOWER = "Lower"
    UPPER = "Upper"
    OLETTER = "OLetter"
    NUMERIC = "Numeric"
    ATERM = "ATerm"
    SCONTINUE = "SContinue"
    STERM = "STerm"
    CLOSE = "Close"
    OTHER = "Other"



class ConjunctBreak(Enum):
    """Indic_Conjunct_Break values (GB9c)."""

    CONSONANT = "Consonant"
    LINKER = "Linker"
    EXTEND = "Extend"
    NONE = "None"


class RangeTable:
    """Immutable map from code point to property value over sorted runs."""

    def __init__(self, ranges: list[tuple[int, int, Enum]], default: Enum):
        ranges = sorted(ranges)
        self._starts = tuple(r[0] for r in ranges)
        self._ends = tuple(r[1] for r in ranges)
        self._values = tuple(r[2] for r in ranges)
        self.default = default

    def __len__(self):
        return len(self._starts)

    def lookup(self, code_point: int) -> Enum:
        i = bisect_right(self._starts, code_point) - 1
        if i >= 0 and code_point < self._ends[i]:
            return self._values[i]
        return self.default

    def ranges(self) -> Iterator[tuple[int, int, Enum]]:
        """Yield (start, end, value) with end exclusive."""
        yield from zip(self._starts, self._ends, self._values)


def _code_space() -> str:
    return "".join(map(chr, range(MAX_CODE_POINT + 1)))


def _build_table(name: str, branches: list[tuple[str, Enum]], default: Enum) -> RangeTable:
    """Build a RangeTable from (regex-item, value) branches tried in order."""
    started = time.perf_counter()
    pattern = regex.compile(
        "|".join(f"(?P<g{i}>(?:{item})+)" for i, (item, _) in enumerate(branches))
    )
    values = {f"g{i}": value for i, (_, value) in enumerate(branches)}
    ranges = [(m.start(), m.end(), values[m.lastgroup]) for m in pattern.finditer(_code_space())]
    table = RangeTable(ranges, default)
    logger.debug("Built %s break table: %d ranges in %.2fs", name, len(table), time.perf_counter() - started)
    return table


def _grapheme_branches() -> list[tuple[str, Enum]]:
    branches = [
        (rf"\p{{Grapheme_Cluster_Break={p.value}}}", p)
        for p in BreakProperty
        if p not in (BreakProperty.EXTENDED_PICTOGRAPHIC, BreakProperty.OTHER)
    ]
    # Extended_Pictographic only where the cluster break value is Other.
    branches.append(
        (r"(?=\p{Grapheme_Cluster_Break=Other})\p{Extended_Pictographic}", BreakProperty.EXTENDED_PICTOGRAPHIC)
    )
    return branches


def _word_branches() -> list[tuple[str, Enum]]:
    return [(rf"\p{{Word_Break={p.value}}}", p) for p in WordBreakProperty if p is not WordBreakProperty.OTHER]


def _sentence_branches() -> list[tuple[str, Enum]]:
    return [
        (rf"\p{{Sentence_Break={p.value}}}", p)
        for p in SentenceBreakProperty
        if p is not SentenceBreakProperty.OTHER
    ]


def _conjunct_branches() -> list[tuple[str, Enum]]:
    return [(rf"\p{{InCB={p.value}}}", p) for p in ConjunctBreak if p is not ConjunctBreak.NONE]


_SOURCES = {
    "grapheme": (_grapheme_branches, BreakProperty.OTHER),
    "word": (_word_branches, WordBreakProperty.OTHER),
    "sentence": (_sentence_branches, SentenceBreakProperty.OTHER),
    "conjunct": (_conjunct_branches, ConjunctBreak.NONE),
}

_tables: dict[str, RangeTable] = {}
_lock = threading.Lock()


def get_table(kind: str) -> RangeTable:
    """Return the process-wide table for kind ('grapheme', 'word', 'sentence' or 'conjunct')."""
    table = _tables.get(kind)
    if table is not None:
        return table
    if kind not in _SOURCES:
        raise ValueError(f"unknown table kind {kind!r}; expected one of {sorted(_SOURCES)}")
    with _lock:
        table = _tables.get(kind)
        if table is None:
            branches, default = _SOURCES[kind]
            table = _build_table(kind, branches(), default)
            _tables[kind] = table
    return table


def iter_ranges(kind: str = "grapheme") -> Iterator[tuple[int, int, Enum]]:
    return get_table(kind).ranges()


def _in_code_space(code_point) -> bool:
    return isinstance(code_point, int) and 0 <= code_point <= MAX_CODE_POINT


def property_of(code_point: int) -> BreakProperty:
    """Grapheme cluster break property of code_point; Other when unclassified."""
    if not _in_code_space(code_point):
        return BreakProperty.OTHER
    return get_table("grapheme").lookup(code_point)


def word_property_of(code_point: int) -> WordBreakProperty:
    if not _in_code_space(code_point):
        return WordBreakProperty.OTHER
    return get_table("word").lookup(code_point)


def sentence_property_of(code_point: int) -> SentenceBreakProperty:
    if not _in_code_space(code_point):
        return SentenceBreakProperty.OTHER
    return get_table("sentence").lookup(code_point)


def conjunct_property_of(code_point: int) -> ConjunctBreak:
    if not _in_code_space(code_point):
        return ConjunctBreak.NONE
    return get_table("conjunct").lookup(code_point)


def is_extended_pictographic(code_point: int) -> bool:
    return property_of(code_point) is BreakProperty.EXTENDED_PICTOGRAPHIC
