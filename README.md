# coniter

This package provides concurrent iterators that many threads can pull from at
once. Each element is handed out exactly once, either singly or in contiguous
chunks. Each element is reported with its index in the data it came from.

## Iterators

- `coniter.slice.ConIterOfSlice` iterates over a sequence and leaves the sequence unchanged.
- `coniter.range.ConIterOfRange` iterates over a `range` of integers. It raises `TypeError` for any other type.
- `coniter.vec.ConIterOfVec` copies the given iterable into a list that it owns. It releases each element as it hands the element out.

All three derive from `coniter.base.ConcurrentIter`. They share a position
counter that is protected by a lock, so threads never receive the same element.

## Pulling elements

```python
import threading

from coniter.slice import ConIterOfSlice

words = [str(i) for i in range(1000)]
con_iter = ConIterOfSlice(words)
results = []
lock = threading.Lock()

def work():
    while (chunk := con_iter.next_chunk(64)) is not None:
        processed = [(chunk.begin_idx + i, w.upper()) for i, w in enumerate(chunk.values)]
        with lock:
            results.extend(processed)

threads = [threading.Thread(target=work) for _ in range(4)]
for t in threads:
    t.start()
for t in threads:
    t.join()

assert sorted(results) == [(i, w.upper()) for i, w in enumerate(words)]
```

Every concurrent iterator has these methods:

- `next()` returns the next element, or `None` once the iterator is exhausted.
- `next_id_and_value()` returns a `coniter.next.Next` with fields `idx` and `value`, or `None` once the iterator is exhausted.
- `next_chunk(n)` claims up to `n` consecutive elements. It returns a `coniter.next.NextChunk` with fields `begin_idx` and `values`, or `None` when no elements remain. A negative `n` raises `ValueError`.
- `next_chunk_x(n)` claims elements in the same way and returns only the values.
- `try_get_len()` returns the number of elements that have not been handed out.
- `try_get_initial_len()` returns the number of elements the iterator started with.
- `skip_to_end()` marks every remaining element as taken.
- `into_seq_iter()` returns an ordinary iterator over the elements that have not been taken. For `ConIterOfVec`, this call moves those elements out and leaves the concurrent iterator exhausted. For `ConIterOfRange`, it returns the rest of the range as a `range`.

`ConIterOfSlice` and `ConIterOfRange` also have `clone()`. It returns an
independent iterator over the same data, starting at the same position.

`Next.cloned()` and `NextChunk.cloned()` deep-copy the values.
`Next.copied()` and `NextChunk.copied()` make shallow copies of the values.
`len()` of a `NextChunk` gives the number of values the chunk has not yet yielded.

The values of a chunk come as a `coniter.no_leak_iter.NoLeakIter`. This is a
sized iterator that produces all of its remaining items when it is closed,
when it is used as a context manager and the block exits, or when it is
discarded.

A concurrent iterator also works directly in a `for` loop. `values()` yields
the elements, and `ids_and_values()` yields `(index, value)` pairs:

```python
from coniter.range import ConIterOfRange

con_iter = ConIterOfRange(range(10))
for idx, value in con_iter.ids_and_values():
    print(idx, value)
```

`repr()` reports progress in this form:
`ConIterOfVec { initial_len: 3, taken: 1, remaining: 2 }`.

## Limitations

No concurrent iterator here takes an arbitrary iterator or generator. To
share one between threads, collect it into a list and pass the list to
`ConIterOfVec`.

## Tests

```
pip install -e .[test]
pytest
```