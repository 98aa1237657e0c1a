"""An iterator that always runs its source to the end."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class NoLeakIter:
    """Sized iterator that drains its source when closed or discarded.

    Every item claimed for this iterator is produced even when the caller stops
    early, so side effects of producing items are never skipped.
    """

    def __init__(self, iterable: Iterable[Any], length: int) -> None:
        self._iter: Iterator[Any] = iter(iterable)
        self._remaining = max(length, 0)

    def __iter__(self) -> NoLeakIter:
        return self

    def __next__(self) -> Any:
        try:
            value = next(self._iter)
        except StopIteration:
            self._remaining = 0
            raise
        if self._remaining > 0:
            self._remaining -= 1
        return value

    def __len__(self) -> int:
        return self._remaining

    def close(self) -> None:
        """Produce and discard every item not yet yielded."""
        deque(self._iter, maxlen=0)
        self._remaining = 0

    def __enter__(self) -> NoLeakIter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass