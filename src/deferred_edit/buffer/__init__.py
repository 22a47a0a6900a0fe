"""Deferred edit buffers and the records they queue."""

from .buffer import ByteEditBuffer, EditBuffer, TextEditBuffer
from .edits import Edit
from .errors import (
    EditBufferError,
    InvalidEditRangeError,
    OverlappingEditsError,
    SinkWriteError,
)
from .sink import CountingWriter, Sink
from .validation import ensure_range

__all__ = [
    "Edit",
    "EditBuffer",
    "ByteEditBuffer",
    "TextEditBuffer",
    "EditBufferError",
    "InvalidEditRangeError",
    "OverlappingEditsError",
    "SinkWriteError",
    "CountingWriter",
    "Sink",
    "ensure_range",
]
