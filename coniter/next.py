"""Results handed out by concurrent iterators: single items and chunks."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class Next(Generic[T]):
    """An element pulled from a concurrent iterator together with its position."""

    idx: int
    value: T

    def cloned(self) -> Next[T]:
        """Return a copy of this result whose value is deep-copied."""
        return Next(self.idx, copy.deepcopy(self.value))

    def copied(self) -> Next[T]:
        """Return a copy of this result whose value is shallow-copied."""
        return Next(self.idx, copy.copy(self.value))


class _MappedSized:
    """Lazily applies a function to each item of a sized iterator, keeping its length."""

    def __init__(self, func: Callable[[Any], Any], source: Iterator[Any]) -> None:
        self._func = func
        self._source = source

    def __iter__(self) -> _MappedSized:
        return self

    def __next__(self) -> Any:
        return self._func(next(self._source))

    def __len__(self) -> int:
        return len(self._source)


@dataclass
class NextChunk(Generic[T]):
    """A run of consecutive elements pulled at once.

    ``begin_idx`` is the position of the first element yielded by ``values``.
    """

    begin_idx: int
    values: Iterator[T]

    def cloned(self) -> NextChunk[T]:
        """Return a chunk whose values are deep-copied as they are yielded."""
        return NextChunk(self.begin_idx, _MappedSized(copy.deepcopy, self.values))

    def copied(self) -> NextChunk[T]:
        """Return a chunk whose values are shallow-copied as they are yielded."""
        return NextChunk(self.begin_idx, _MappedSized(copy.copy, self.values))

    def __len__(self) -> int:
        return len(self.values)