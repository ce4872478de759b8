"""Tests for word boundaries."""
import pytest
import sys
import time
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from segkit.segment.spans import Span
from segkit.segment.word import is_word, segment_words, unicode_words


def chunks(text):
    return list(segment_words(text).texts())


def test_words_and_punctuation():
    assert chunks("Hello, world!") == ["Hello", ",", " ", "world", "!"]


def test_unicode_words():
    text = "The quick (\"brown\") fox can't jump 32.3 feet, right?"
    assert unicode_words(text) == ["The", "quick", "brown", "fox", "can't", "jump", "32.3", "feet", "right"]


def test_apostrophe_and_decimal_stay_inside():
    assert chunks("can't") == ["can't"]
    assert chunks("3.14") == ["3.14"]
    assert chunks("a.b") == ["a.b"]
    assert chunks("end.") == ["end", "."]


def test_space_runs_stay_together():
    assert chunks("a  b") == ["a", "  ", "b"]


def test_newlines():
    assert chunks("a\nb") == ["a", "\n", "b"]
    assert chunks("\r\n") == ["\r\n"]


def test_extend_folds_into_word():
    assert chunks("e\u0301x y") == ["e\u0301x", " ", "y"]


def test_katakana_and_extendnumlet():
    assert chunks("\u30ab\u30bf\u30ab\u30ca") == ["\u30ab\u30bf\u30ab\u30ca"]
    assert chunks("snake_case_42") == ["snake_case_42"]


def test_regional_indicators():
    flags = "\U0001F1FA\U0001F1F8\U0001F1EB\U0001F1F7"
    assert [tuple(s) for s in segment_words(flags)] == [(0, 2), (2, 4)]


def test_emoji_zwj_sequence():
    assert chunks("\U0001F469\u200d\U0001F469 ok") == ["\U0001F469\u200d\U0001F469", " ", "ok"]


def test_byte_offsets():
    assert list(segment_words(b"hi there")) == [Span(0, 2), Span(2, 3), Span(3, 8)]
    assert list(segment_words("\u00e9t\u00e9 x".encode("utf-8"))) == [Span(0, 5), Span(5, 6), Span(6, 7)]


def test_empty():
    assert list(segment_words("")) == []
    assert unicode_words("") == []


def test_is_word():
    assert is_word("abc")
    assert is_word("42")
    assert is_word("caf\u00e9".encode("utf-8"))
    assert not is_word("  ")
    assert not is_word(",")


def best_time(fn, arg, repeat=5):
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn(arg)
        best = min(best, time.perf_counter() - t0)
    return best


@pytest.mark.parametrize("make", [
    lambda n: "can" + "\u0301" * n + "'",  # every mark scans ahead to the end
    lambda n: "1" + ".\u0301" * n,
    lambda n: "The cat sat on the mat. It was happy, wasn't it? Yes, very. " * (n // 60),
])
def test_segmentation_time_is_linear(make):
    def run(text):
        return len(segment_words(text))
    run(make(100))  # build the property tables outside the timed region
    small = best_time(run, make(2000))
    large = best_time(run, make(32000))
    # 16x the input; a quadratic scan would take ~256x as long.
    assert large < small * 64


def test_lookahead_skips_ignored_marks():
    marks = "\u0301" * 2000
    assert chunks("can" + marks + "'" + marks + "t") == ["can" + marks + "'" + marks + "t"]
    assert chunks("3" + marks + "." + marks + "5") == ["3" + marks + "." + marks + "5"]
    assert chunks("can'" + marks) == ["can", "'" + marks]
