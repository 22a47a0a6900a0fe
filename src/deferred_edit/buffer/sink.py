"""Output sinks accepted by ``EditBuffer.write_to``."""

from __future__ import annotations

from typing import Generic, Optional, Protocol, TypeVar

from .errors import SinkWriteError

T_contra = TypeVar("T_contra", contravariant=True)


class Sink(Protocol[T_contra]):
    """Anything with a file-like ``write``: ``io.BytesIO``, ``io.StringIO``, files."""

    def write(self, data: T_contra, /) -> Optional[int]:
        ...


class CountingWriter(Generic[T_contra]):
    """Wraps a sink and tallies how much of each chunk it accepted.

    Sinks returning ``None`` from ``write`` are assumed to take the whole chunk.
    Any exception from the sink is re-raised as ``SinkWriteError`` carrying the
    count written so far.
    """

    def __init__(self, sink: Sink[T_contra]) -> None:
        self.sink = sink
        self.total = 0

    def write(self, chunk: T_contra) -> None:
        if not len(chunk):  # type: ignore[arg-type]
            return
        try:
            written = self.sink.write(chunk)
        except Exception as exc:
            raise SinkWriteError(
                f"sink write failed after {self.total} units: {exc}",
                written=self.total,
            ) from exc
        expected = len(chunk)  # type: ignore[arg-type]
        self.total += expected if written is None else written
        if written is not None and written < expected:
            raise SinkWriteError(
                f"short write: sink took {written} of {expected} units",
                written=self.total,
            )
