"""Decode text or UTF-8 buffers into code points with stable offsets.

``str`` input is indexed by code point (every code point has length 1), so
spans slice the string directly. ``bytes`` input is decoded as UTF-8 and
indexed by byte. The whole buffer is validated before the first code point
is yielded, so a malformed buffer fails before any segmentation work.
"""
from typing import Iterator, NamedTuple

from segkit.errors import DecodeError


class CodePoint(NamedTuple):
    value: int
    offset: int
    length: int


def utf8_length(value: int) -> int:
    """Number of bytes UTF-8 uses for a scalar value."""
    if value < 0x80:
        return 1
    if value < 0x800:
        return 2
    if value < 0x10000:
        return 3
    return 4


def decode_buffer(buffer) -> tuple[str, bool]:
    """Validate buffer; return (text, byte_offsets)."""
    if isinstance(buffer, str):
        try:
            buffer.encode("utf-8")
        except UnicodeEncodeError as e:
            raise DecodeError(e.start, "lone surrogate") from e
        return buffer, False
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        try:
            return bytes(buffer).decode("utf-8"), True
        except UnicodeDecodeError as e:
            raise DecodeError(e.start, e.reason) from e
    raise TypeError(f"expected str or bytes-like buffer, got {type(buffer).__name__}")


def iter_decoded(text: str, byte_offsets: bool) -> Iterator[CodePoint]:
    if not byte_offsets:
        for i, ch in enumerate(text):
            yield CodePoint(ord(ch), i, 1)
        return
    offset = 0
    for ch in text:
        value = ord(ch)
        length = utf8_length(value)
        yield CodePoint(value, offset, length)
        offset += length


def iter_code_points(buffer) -> Iterator[CodePoint]:
    """Yield CodePoint for every scalar value in buffer.

    Raises DecodeError immediately (not on first iteration) when the buffer
    holds malformed UTF-8 or lone surrogates.
    """
    text, byte_offsets = decode_buffer(buffer)
    return iter_decoded(text, byte_offsets)


def buffer_length(buffer) -> int:
    """Length of buffer in the units its offsets use."""
    if isinstance(buffer, str):
        return len(buffer)
    return len(bytes(buffer))
