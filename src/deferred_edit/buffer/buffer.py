"""Deferred edit buffers over immutable byte and text content.

Edits are queued against offsets of the original content and only resolved
when the buffer is materialized. Materialization sorts the queue by
``(start, end)``, walks it once, copies untouched spans between edits and
writes each replacement in place of the span it covers.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Union

from deferred_edit.runtime import telemetry

from .edits import Edit, Replacement
from .errors import OverlappingEditsError
from .sink import CountingWriter, Sink
from .validation import ensure_range

BytesLike = Union[bytes, bytearray, memoryview]


class EditBuffer(ABC):
    """Queue of edits applied to a piece of content on demand.

    The buffer keeps a reference to ``content`` and never copies it, so the
    caller must not mutate it while the buffer is in use. Not thread-safe:
    ``write_to`` sorts the queue in place.
    """

    def __init__(self, content: Any) -> None:
        self._content = content
        self._edits: List[Edit] = []

    @classmethod
    def from_content(cls, content: Union[str, BytesLike]) -> "EditBuffer":
        if isinstance(content, str):
            return TextEditBuffer(content)
        if isinstance(content, (bytes, bytearray, memoryview)):
            return ByteEditBuffer(content)
        raise TypeError(
            f"unsupported content type {type(content).__name__!r}; "
            "expected str or a bytes-like object"
        )

    @property
    def content(self) -> Any:
        return self._content

    @property
    @abstractmethod
    def content_length(self) -> int:
        ...

    @property
    def edits(self) -> Tuple[Edit, ...]:
        return tuple(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self.content_length}, "
            f"edits={len(self._edits)})"
        )

    def __str__(self) -> str:
        return self.to_text()

    def insert(self, pos: int, text: Replacement) -> None:
        """Insert ``text`` at ``content[pos:pos]``."""

        self.replace(pos, pos, text)

    def delete(self, start: int, end: int) -> None:
        """Delete ``content[start:end]``."""

        self.replace(start, end, self._coerce(""))

    def replace(self, start: int, end: int, text: Replacement) -> None:
        """Replace ``content[start:end]`` with ``text``."""

        ensure_range(self.content_length, start, end)
        self._edits.append(Edit(start, end, self._coerce(text)))

    def write_to(self, sink: Sink[Any]) -> int:
        """Write the content with all queued edits applied to ``sink``.

        Returns the number of units (bytes or characters) written. Raises
        ``OverlappingEditsError`` when two overlapping edits are not both pure
        deletions, and ``SinkWriteError`` when the sink fails part-way.
        """

        self._edits.sort(key=Edit.sort_key)
        writer: CountingWriter[Any] = CountingWriter(sink)

        with telemetry.span(
            "buffer::write_to",
            component="buffer",
            metadata={
                "variant": type(self).__name__,
                "length": self.content_length,
                "edits": len(self._edits),
            },
        ) as handle:
            cursor = 0
            previous: Optional[Edit] = None
            for edit in self._edits:
                if edit.start < cursor:
                    assert previous is not None
                    if edit.replacement or previous.replacement:
                        handle.add_metadata(
                            "conflict", f"{previous.describe()} {edit.describe()}"
                        )
                        raise OverlappingEditsError(previous, edit)
                    telemetry.record_event(
                        "buffer.merge_deletions",
                        level="debug",
                        data={
                            "consumed": cursor,
                            "start": edit.start,
                            "end": edit.end,
                        },
                    )
                    if edit.end < cursor:
                        continue
                else:
                    writer.write(self._span(cursor, edit.start))
                writer.write(edit.replacement)
                cursor = edit.end
                previous = edit
            writer.write(self._span(cursor, self.content_length))
            handle.add_metadata("written", writer.total)

        return writer.total

    @abstractmethod
    def to_bytes(self, errors: str = "surrogateescape") -> bytes:
        ...

    @abstractmethod
    def to_text(self, errors: str = "surrogateescape") -> str:
        """Materialize as ``str``.

        Conversions between bytes and text use UTF-8 with ``errors`` as the
        codec error handler. The default ``surrogateescape`` never fails and
        round-trips arbitrary bytes.
        """

    @abstractmethod
    def _span(self, start: int, end: int) -> Any:
        ...

    @abstractmethod
    def _coerce(self, text: Replacement) -> Replacement:
        ...


class ByteEditBuffer(EditBuffer):
    """Edit buffer over a bytes-like object, addressed by byte offsets.

    Replacements may be ``str`` (encoded as UTF-8) or bytes-like.
    """

    def __init__(self, content: BytesLike) -> None:
        super().__init__(content)
        self._view = memoryview(content).cast("B").toreadonly()

    @property
    def content_length(self) -> int:
        return self._view.nbytes

    def to_bytes(self, errors: str = "surrogateescape") -> bytes:
        out = io.BytesIO()
        self.write_to(out)
        return out.getvalue()

    def to_text(self, errors: str = "surrogateescape") -> str:
        return self.to_bytes().decode("utf-8", errors)

    def _span(self, start: int, end: int) -> memoryview:
        return self._view[start:end]

    def _coerce(self, text: Replacement) -> bytes:
        if isinstance(text, str):
            return text.encode("utf-8")
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        raise TypeError(
            f"replacement must be str or bytes-like, not {type(text).__name__!r}"
        )


class TextEditBuffer(EditBuffer):
    """Edit buffer over a ``str``, addressed by character offsets."""

    def __init__(self, content: str) -> None:
        if not isinstance(content, str):
            raise TypeError(f"content must be str, not {type(content).__name__!r}")
        super().__init__(content)

    @property
    def content_length(self) -> int:
        return len(self._content)

    def to_bytes(self, errors: str = "surrogateescape") -> bytes:
        return self.to_text().encode("utf-8", errors)

    def to_text(self, errors: str = "surrogateescape") -> str:
        out = io.StringIO(newline="")
        self.write_to(out)
        return out.getvalue()

    def _span(self, start: int, end: int) -> str:
        return self._content[start:end]

    def _coerce(self, text: Replacement) -> str:
        if not isinstance(text, str):
            raise TypeError(f"replacement must be str, not {type(text).__name__!r}")
        return text
