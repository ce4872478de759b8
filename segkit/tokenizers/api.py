"""Tokenizer interface."""
from abc import ABC, abstractmethod
from typing import Iterator

from segkit.tokenizers.util import string_span_tokenize


class TokenizerI(ABC):
    """A processing interface for tokenizing a string.

    Subclasses must define tokenize() and span_tokenize().
    """

    @abstractmethod
    def tokenize(self, s: str) -> list[str]:
        """Return a tokenized copy of s."""

    @abstractmethod
    def span_tokenize(self, s: str) -> Iterator[tuple[int, int]]:
        """Identify tokens by (start, end) offsets, where s[start:end] is the token."""

    def tokenize_sents(self, strings: list[str]) -> list[list[str]]:
        return [self.tokenize(s) for s in strings]

    def span_tokenize_sents(self, strings: list[str]) -> Iterator[list[tuple[int, int]]]:
        for s in strings:
            yield list(self.span_tokenize(s))


class StringTokenizer(TokenizerI):
    """Split a string into substrings on a fixed delimiter."""

    _string = None

    def tokenize(self, s: str) -> list[str]:
        return s.split(self._string)

    def span_tokenize(self, s: str) -> Iterator[tuple[int, int]]:
        yield from string_span_tokenize(s, self._string)
