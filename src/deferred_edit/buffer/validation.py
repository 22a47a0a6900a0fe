"""Validation helpers shared across buffer variants."""

from __future__ import annotations

from .errors import InvalidEditRangeError


def ensure_range(length: int, start: int, end: int) -> None:
    if start < 0 or end < start or end > length:
        raise InvalidEditRangeError(start, end, length=length)
