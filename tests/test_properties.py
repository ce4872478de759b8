"""Tests for break property tables."""
import pytest
import sys
from importlib import metadata
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
import regex

from segkit.unicode.properties import (
    MAX_CODE_POINT,
    RULES_VERSION,
    UNICODE_VERSION,
    BreakProperty as P,
    ConjunctBreak as C,
    RangeTable,
    SentenceBreakProperty as S,
    WordBreakProperty as W,
    conjunct_property_of,
    get_table,
    is_extended_pictographic,
    iter_ranges,
    detect_data_version,
    property_of,
    sentence_property_of,
    version_tuple,
    word_property_of,
)


@pytest.mark.parametrize("cp,expected", [
    (0x0D, P.CR),
    (0x0A, P.LF),
    (0x00, P.CONTROL),
    (0x0301, P.EXTEND),
    (0xFE0F, P.EXTEND),
    (0x200D, P.ZWJ),
    (0x1F1E6, P.REGIONAL_INDICATOR),
    (0x0600, P.PREPEND),
    (0x0903, P.SPACING_MARK),
    (0x1100, P.L),
    (0x1161, P.V),
    (0x11A8, P.T),
    (0xAC00, P.LV),
    (0xAC01, P.LVT),
    (0x1F600, P.EXTENDED_PICTOGRAPHIC),
    (0x00A9, P.EXTENDED_PICTOGRAPHIC),
    (0x41, P.OTHER),
    (0x0D85, P.OTHER),
])
def test_grapheme_property(cp, expected):
    assert property_of(cp) is expected


def test_out_of_range_is_other():
    assert property_of(-1) is P.OTHER
    assert property_of(MAX_CODE_POINT + 1) is P.OTHER
    assert property_of("a") is P.OTHER
    assert word_property_of(-5) is W.OTHER
    assert sentence_property_of(0x110000) is S.OTHER


def test_extended_pictographic_only_where_other():
    # U+1F3FD is pictographic but its cluster break value is Extend.
    assert property_of(0x1F3FD) is P.EXTEND
    assert not is_extended_pictographic(0x1F3FD)
    assert is_extended_pictographic(0x1F469)


@pytest.mark.parametrize("ch,expected", [
    ("a", W.ALETTER),
    ("'", W.SINGLE_QUOTE),
    ('"', W.DOUBLE_QUOTE),
    (".", W.MIDNUMLET),
    (":", W.MIDLETTER),
    (",", W.MIDNUM),
    ("7", W.NUMERIC),
    ("_", W.EXTENDNUMLET),
    (" ", W.WSEGSPACE),
    ("\u05d0", W.HEBREW_LETTER),
    ("\u30a2", W.KATAKANA),
    ("\u0085", W.NEWLINE),
    ("\u00ad", W.FORMAT),
    ("?", W.OTHER),
])
def test_word_property(ch, expected):
    assert word_property_of(ord(ch)) is expected


@pytest.mark.parametrize("ch,expected", [
    ("a", S.LOWER),
    ("A", S.UPPER),
    (".", S.ATERM),
    ("!", S.STERM),
    (" ", S.SP),
    (")", S.CLOSE),
    (",", S.SCONTINUE),
    ("1", S.NUMERIC),
    ("\u2029", S.SEP),
    ("\u05d0", S.OLETTER),
])
def test_sentence_property(ch, expected):
    assert sentence_property_of(ord(ch)) is expected


def test_table_is_built_once():
    assert get_table("grapheme") is get_table("grapheme")


def test_unknown_table_kind():
    with pytest.raises(ValueError):
        get_table("line")


def test_ranges_sorted_and_disjoint():
    prev_end = 0
    for start, end, value in iter_ranges("grapheme"):
        assert start >= prev_end
        assert end > start
        assert end <= MAX_CODE_POINT + 1
        assert value is not P.OTHER
        prev_end = end


def test_range_table_lookup():
    table = RangeTable([(10, 20, W.NUMERIC), (0, 5, W.ALETTER)], W.OTHER)
    assert len(table) == 2
    assert table.lookup(0) is W.ALETTER
    assert table.lookup(4) is W.ALETTER
    assert table.lookup(5) is W.OTHER
    assert table.lookup(19) is W.NUMERIC
    assert table.lookup(20) is W.OTHER
    assert list(table.ranges()) == [(0, 5, W.ALETTER), (10, 20, W.NUMERIC)]


@pytest.mark.parametrize("cp,expected", [
    (0x0915, C.CONSONANT),
    (0x094D, C.LINKER),
    (0x0301, C.EXTEND),
    (0x200D, C.EXTEND),
    (0x41, C.NONE),
])
def test_conjunct_property(cp, expected):
    assert conjunct_property_of(cp) is expected
    assert conjunct_property_of(-1) is C.NONE


def test_data_version_matches_tables():
    detected = detect_data_version()
    assert detected is not None
    description = metadata.metadata("regex").json.get("description", "")
    stated = regex.search(r"supports Unicode (\d+\.\d+\.\d+)", description)
    assert UNICODE_VERSION == (stated.group(1) if stated else detected)
    assert version_tuple(detected) <= version_tuple(UNICODE_VERSION)
    assert version_tuple(UNICODE_VERSION) >= version_tuple(RULES_VERSION)


def test_version_tuple():
    assert version_tuple("15.1.0") == (15, 1, 0)
    assert version_tuple("9.0.0") < version_tuple("15.0.0")
