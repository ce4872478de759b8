"""Simple tokenizers that split on a delimiter, on lines, or on grapheme clusters.

These are mostly useful because they follow the TokenizerI interface and
so can be used with any code that expects a tokenizer.
"""
from typing import Iterator

from segkit.segment.grapheme import graphemes, segment_graphemes
from segkit.tokenizers.api import StringTokenizer, TokenizerI
from segkit.tokenizers.util import regexp_span_tokenize, string_span_tokenize

BLANKLINE_MODES = ("discard", "keep", "discard-eof")


class SpaceTokenizer(StringTokenizer):
    """Tokenize on single spaces, like s.split(" ")."""

    _string = " "


class TabTokenizer(StringTokenizer):
    """Tokenize on tabs, like s.split("\\t")."""

    _string = "\t"


class CharTokenizer(TokenizerI):
    """Tokenize a string into user-perceived characters (grapheme clusters)."""

    def tokenize(self, s: str) -> list[str]:
        return graphemes(s)

    def span_tokenize(self, s: str) -> Iterator[tuple[int, int]]:
        for span in segment_graphemes(s):
            yield span.start, span.end


class LineTokenizer(TokenizerI):
    """Tokenize a string into its lines, optionally discarding blank lines.

    blanklines is one of "discard" (drop all blank lines), "keep" or
    "discard-eof" (drop only a trailing blank line).
    """

    def __init__(self, blanklines: str = "discard"):
        if blanklines not in BLANKLINE_MODES:
            raise ValueError(f"Blank lines must be one of: {' '.join(BLANKLINE_MODES)}")
        self._blanklines = blanklines

    def tokenize(self, s: str) -> list[str]:
        lines = s.splitlines()
        if self._blanklines == "discard":
            lines = [line for line in lines if line.rstrip()]
        elif self._blanklines == "discard-eof":
            if lines and not lines[-1].strip():
                lines.pop()
        return lines

    def span_tokenize(self, s: str) -> Iterator[tuple[int, int]]:
        if self._blanklines == "keep":
            yield from string_span_tokenize(s, "\n")
        else:
            yield from regexp_span_tokenize(s, r"\n(\s+\n)*")


def line_tokenize(text: str, blanklines: str = "discard") -> list[str]:
    return LineTokenizer(blanklines).tokenize(text)
