"""Concurrent iterator over a range of integers."""

from __future__ import annotations

from typing import Iterator, Optional

from .base import _AtomicCounter
from .next import Next, NextChunk
from .slice import _IndexedConIter


class ConIterOfRange(_IndexedConIter):
    """A concurrent iterator handing out the integers of a ``range``."""

    def __init__(self, values: range) -> None:
        if not isinstance(values, range):
            raise TypeError("ConIterOfRange requires a range")
        self._setup(values)

    def next(self) -> Optional[int]:
        idx = self._claim_one()
        return None if idx is None else self._get(idx)

    def next_id_and_value(self) -> Optional[Next[int]]:
        idx = self._claim_one()
        return None if idx is None else Next(idx, self._get(idx))

    def next_chunk(self, chunk_size: int) -> Optional[NextChunk[int]]:
        return self._chunk(chunk_size)

    def next_chunk_x(self, chunk_size: int) -> Optional[Iterator[int]]:
        bounds = self._claim(chunk_size)
        return None if bounds is None else self._between(*bounds)

    def try_get_len(self) -> int:
        return self._remaining()

    def try_get_initial_len(self) -> int:
        return self._len

    def skip_to_end(self) -> None:
        self._counter.fetch_max(self._len)

    def into_seq_iter(self) -> range:
        """Return the part of the range that has not been handed out yet."""
        return self._values[self._position():]

    def clone(self) -> ConIterOfRange:
        """Return an independent iterator over the same range at the same position."""
        twin = type(self)(self._values)
        twin._counter = _AtomicCounter(self._counter.load())
        return twin