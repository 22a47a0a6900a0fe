"""Edit records queued by the buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

Replacement = Union[str, bytes]


@dataclass(frozen=True, slots=True)
class Edit:
    """Replace ``content[start:end]`` with ``replacement``.

    Insertions have ``start == end``; deletions have an empty replacement.
    Offsets always refer to the original content, never to produced output.
    """

    start: int
    end: int
    replacement: Replacement = ""

    @property
    def is_deletion(self) -> bool:
        return not self.replacement

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end and bool(self.replacement)

    def sort_key(self) -> Tuple[int, int]:
        # Ties on start break by end so an insertion at x precedes [x, y).
        return (self.start, self.end)

    def describe(self) -> str:
        return f"[{self.start},{self.end})->{self.replacement!r}"


__all__ = ["Edit", "Replacement"]
