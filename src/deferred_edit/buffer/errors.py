"""Exceptions raised by edit buffers."""

from __future__ import annotations

from .edits import Edit


class EditBufferError(RuntimeError):
    """Base class for every buffer failure."""


class InvalidEditRangeError(EditBufferError, IndexError):
    """Raised when an edit is queued with offsets outside the content."""

    def __init__(self, start: int, end: int, *, length: int) -> None:
        super().__init__(
            f"invalid edit position: [{start},{end}) for content of length {length}"
        )
        self.start = start
        self.end = end
        self.length = length


class OverlappingEditsError(EditBufferError):
    """Raised at materialization when overlapping edits carry replacement text."""

    def __init__(self, previous: Edit, current: Edit) -> None:
        super().__init__(
            f"overlapping edits: {previous.describe()}, {current.describe()}"
        )
        self.previous = previous
        self.current = current


class SinkWriteError(EditBufferError):
    """Raised when the output sink fails; ``written`` holds the partial count."""

    def __init__(self, message: str, *, written: int) -> None:
        super().__init__(message)
        self.written = written


__all__ = [
    "EditBufferError",
    "InvalidEditRangeError",
    "OverlappingEditsError",
    "SinkWriteError",
]
