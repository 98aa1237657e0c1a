"""Concurrent iterator over a sequence, handing out its elements."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from .base import ConcurrentIter, _AtomicCounter
from .next import Next, NextChunk
from .no_leak_iter import NoLeakIter


class _IndexedConIter(ConcurrentIter):
    """Shared machinery for concurrent iterators over indexable data.

    Positions are claimed through an atomic counter; subclasses decide how an
    element at a position is read and how a run of positions is produced.
    """

    def _setup(self, values: Sequence[Any]) -> None:
        self._values = values
        self._len = len(values)
        self._counter = _AtomicCounter()

    def _get(self, idx: int) -> Any:
        return self._values[idx]

    def _between(self, begin: int, end: int) -> NoLeakIter:
        return NoLeakIter(self._values[begin:end], end - begin)

    def _claim_one(self) -> Optional[int]:
        idx = self._counter.fetch_add(1)
        return idx if idx < self._len else None

    def _claim(self, chunk_size: int) -> Optional[tuple[int, int]]:
        if chunk_size < 0:
            raise ValueError("chunk_size must not be negative")
        begin = min(self._counter.fetch_add(chunk_size), self._len)
        end = max(min(begin + chunk_size, self._len), begin)
        return (begin, end) if begin < end else None

    def _chunk(self, chunk_size: int) -> Optional[NextChunk[Any]]:
        bounds = self._claim(chunk_size)
        if bounds is None:
            return None
        begin, end = bounds
        return NextChunk(begin, self._between(begin, end))

    def _remaining(self) -> int:
        return max(self._len - self._counter.load(), 0)

    def _position(self) -> int:
        return min(self._counter.load(), self._len)


class ConIterOfSlice(_IndexedConIter):
    """A concurrent iterator over the elements of a sequence, which it leaves intact."""

    def __init__(self, values: Sequence[Any]) -> None:
        self._setup(values)

    def next(self) -> Any:
        idx = self._claim_one()
        return None if idx is None else self._get(idx)

    def next_id_and_value(self) -> Optional[Next[Any]]:
        idx = self._claim_one()
        return None if idx is None else Next(idx, self._get(idx))

    def next_chunk(self, chunk_size: int) -> Optional[NextChunk[Any]]:
        return self._chunk(chunk_size)

    def next_chunk_x(self, chunk_size: int) -> Optional[Iterator[Any]]:
        bounds = self._claim(chunk_size)
        return None if bounds is None else self._between(*bounds)

    def try_get_len(self) -> int:
        return self._remaining()

    def try_get_initial_len(self) -> int:
        return self._len

    def skip_to_end(self) -> None:
        self._counter.fetch_max(self._len)

    def into_seq_iter(self) -> NoLeakIter:
        """Return the elements that have not been handed out yet."""
        return self._between(self._position(), self._len)

    def clone(self) -> ConIterOfSlice:
        """Return an independent iterator over the same data at the same position."""
        twin = type(self)(self._values)
        twin._counter = _AtomicCounter(self._counter.load())
        return twin