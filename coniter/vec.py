"""Concurrent iterator that takes ownership of a list and hands out its elements."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .next import Next, NextChunk
from .no_leak_iter import NoLeakIter
from .slice import _IndexedConIter


class ConIterOfVec(_IndexedConIter):
    """A concurrent iterator that consumes its elements, releasing each one as it is taken."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._setup(list(values))

    def _get(self, idx: int) -> Any:
        value = self._values[idx]
        self._values[idx] = None
        return value

    def _between(self, begin: int, end: int) -> NoLeakIter:
        return NoLeakIter(map(self._get, range(begin, end)), end - begin)

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
        before = self._counter.fetch_max(self._len)
        if before < self._len:
            self._values[before:self._len] = [None] * (self._len - before)

    def into_seq_iter(self) -> NoLeakIter:
        """Move the elements not yet handed out into a sequential iterator.

        The concurrent iterator is exhausted afterwards.
        """
        current = min(self._counter.fetch_max(self._len), self._len)
        remaining = self._values[current:]
        del self._values[current:]
        return NoLeakIter(remaining, len(remaining))