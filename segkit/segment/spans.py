"""Span type and the lazy, restartable segmentation sequence."""
from itertools import islice
from typing import Callable, Iterable, Iterator, NamedTuple

from segkit.unicode.codepoints import CodePoint, decode_buffer, iter_decoded


class Span(NamedTuple):
    """Half-open [start, end) range over the source buffer."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


SpanScanner = Callable[[Iterable[CodePoint]], Iterator[Span]]


class Segmentation:
    """Read-only sequence of spans, computed on demand.

    Every iteration re-runs the scanner from a clean state, so two iterators
    over the same Segmentation never share rule state. Indexing consumes the
    scan only as far as the requested span and keeps the spans produced so
    far.
    """

    def __init__(self, buffer, scanner: SpanScanner):
        # Validation happens here so a bad buffer fails before segmentation.
        self._text, self._byte_offsets = decode_buffer(buffer)
        self.buffer = buffer
        self._scanner = scanner
        self._cache: list[Span] = []
        self._cache_iter: Iterator[Span] | None = None
        self._complete = False

    def __iter__(self) -> Iterator[Span]:
        return self._scanner(iter_decoded(self._text, self._byte_offsets))

    def _fill(self, count: int | None) -> None:
        if self._complete:
            return
        if self._cache_iter is None:
            self._cache_iter = iter(self)
        need = None if count is None else count - len(self._cache)
        if need is not None and need <= 0:
            return
        before = len(self._cache)
        self._cache.extend(islice(self._cache_iter, need))
        if need is None or len(self._cache) - before < need:
            self._complete = True
            self._cache_iter = None

    def __getitem__(self, index: int) -> Span:
        if isinstance(index, slice):
            raise TypeError("Segmentation does not support slicing; use iterate_from()")
        if index < 0:
            self._fill(None)
            index += len(self._cache)
        else:
            self._fill(index + 1)
        if not 0 <= index < len(self._cache):
            raise IndexError(f"span index out of range (segmentation has {len(self._cache)} spans)")
        return self._cache[index]

    def __len__(self) -> int:
        self._fill(None)
        return len(self._cache)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __repr__(self):
        return f"<{type(self).__name__} over {len(self._text)} code points>"

    def iterate_from(self, start: int) -> Iterator[Span]:
        """Iterate spans starting at span number start; empty if start >= len(self)."""
        return islice(iter(self), start, None)

    def texts(self) -> Iterator[str | bytes]:
        """Yield the slice of the original buffer covered by each span."""
        source = bytes(self.buffer) if self._byte_offsets else self._text
        for span in self:
            yield source[span.start:span.end]
