"""Exceptions raised by segkit."""


class SegmentationError(Exception):
    """Base class for segkit errors."""


class DecodeError(SegmentationError, ValueError):
    """Input buffer cannot be decoded into Unicode scalar values."""

    def __init__(self, offset: int, reason: str):
        super().__init__(f"cannot decode input at offset {offset}: {reason}")
        self.offset = offset
        self.reason = reason


class MismatchError(SegmentationError, ValueError):
    """Tokens do not line up with the string they were taken from."""
