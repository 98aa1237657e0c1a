"""The concurrent iterator protocol and plain-iterator views over it."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .next import Next, NextChunk


class _AtomicCounter:
    """An integer counter whose updates are atomic across threads."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, amount: int) -> int:
        with self._lock:
            previous = self._value
            self._value += amount
            return previous

    def fetch_max(self, value: int) -> int:
        with self._lock:
            previous = self._value
            self._value = max(previous, value)
            return previous

    def load(self) -> int:
        with self._lock:
            return self._value


class ConcurrentIter(ABC):
    """An iterator that may be shared by several threads.

    Each element is handed out exactly once, whichever thread asks for it.
    """

    def next(self) -> Any:
        """Return the next element, or None when the iterator is exhausted."""
        item = self.next_id_and_value()
        return None if item is None else item.value

    @abstractmethod
    def next_id_and_value(self) -> Optional[Next[Any]]:
        """Return the next element with its index, or None when exhausted."""

    @abstractmethod
    def next_chunk(self, chunk_size: int) -> Optional[NextChunk[Any]]:
        """Claim up to ``chunk_size`` consecutive elements, or None when none remain."""

    def next_chunk_x(self, chunk_size: int) -> Optional[Iterator[Any]]:
        """Claim up to ``chunk_size`` consecutive elements without their indices."""
        chunk = self.next_chunk(chunk_size)
        return None if chunk is None else chunk.values

    @abstractmethod
    def try_get_len(self) -> Optional[int]:
        """Number of elements not yet handed out, if known."""

    @abstractmethod
    def try_get_initial_len(self) -> Optional[int]:
        """Number of elements the iterator started with, if known."""

    @abstractmethod
    def skip_to_end(self) -> None:
        """Mark every remaining element as taken."""

    @abstractmethod
    def into_seq_iter(self) -> Iterator[Any]:
        """Return a sequential iterator over the elements not yet handed out."""

    def values(self) -> ConIterValues:
        """A plain iterator yielding the remaining elements."""
        return ConIterValues(self)

    def ids_and_values(self) -> ConIterIdsAndValues:
        """A plain iterator yielding ``(index, element)`` pairs."""
        return ConIterIdsAndValues(self)

    def __iter__(self) -> ConIterValues:
        return self.values()

    def __repr__(self) -> str:
        initial = self.try_get_initial_len()
        remaining = self.try_get_len()
        taken = None if initial is None or remaining is None else initial - remaining
        return (
            f"{type(self).__name__} {{ initial_len: {initial}, "
            f"taken: {taken}, remaining: {remaining} }}"
        )


class ConIterValues:
    """Plain iterator over the values of a concurrent iterator."""

    def __init__(self, con_iter: ConcurrentIter) -> None:
        self._con_iter = con_iter

    def __iter__(self) -> ConIterValues:
        return self

    def __next__(self) -> Any:
        item = self._con_iter.next_id_and_value()
        if item is None:
            raise StopIteration
        return item.value


class ConIterIdsAndValues:
    """Plain iterator over ``(index, value)`` pairs of a concurrent iterator."""

    def __init__(self, con_iter: ConcurrentIter) -> None:
        self._con_iter = con_iter

    def __iter__(self) -> ConIterIdsAndValues:
        return self

    def __next__(self) -> tuple[int, Any]:
        item = self._con_iter.next_id_and_value()
        if item is None:
            raise StopIteration
        return item.idx, item.value