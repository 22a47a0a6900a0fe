"""Deferred, position-based editing of immutable byte and text content."""

from .buffer import (
    ByteEditBuffer,
    Edit,
    EditBuffer,
    EditBufferError,
    InvalidEditRangeError,
    OverlappingEditsError,
    SinkWriteError,
    TextEditBuffer,
)

__all__ = [
    "buffer",
    "runtime",
    "Edit",
    "EditBuffer",
    "ByteEditBuffer",
    "TextEditBuffer",
    "EditBufferError",
    "InvalidEditRangeError",
    "OverlappingEditsError",
    "SinkWriteError",
]

__version__ = "0.1.0"
