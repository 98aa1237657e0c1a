from coniter.next import Next, NextChunk
from coniter.no_leak_iter import NoLeakIter


def test_next_fields():
    item = Next(7, "x")
    assert (item.idx, item.value) == (7, "x")


def test_next_cloned_copies_deeply():
    inner = [1, [2, 3]]
    item = Next(4, inner)
    cloned = item.cloned()
    assert cloned == Next(4, [1, [2, 3]])
    assert cloned.value is not inner and cloned.value[1] is not inner[1]


def test_next_copied_is_shallow():
    inner = [1, [2, 3]]
    item = Next(2, inner)
    copied = item.copied()
    assert copied.value == inner
    assert copied.value is not inner
    assert copied.value[1] is inner[1]


def test_chunk_len_follows_values():
    chunk = NextChunk(10, NoLeakIter(["a", "b", "c"], 3))
    assert len(chunk) == 3
    next(chunk.values)
    assert len(chunk) == 2


def test_chunk_cloned_keeps_begin_and_values():
    source = [[1], [2]]
    chunk = NextChunk(5, NoLeakIter(source, 2))
    cloned = chunk.cloned()
    assert cloned.begin_idx == 5
    assert len(cloned) == 2
    values = list(cloned.values)
    assert values == source
    assert all(a is not b for a, b in zip(values, source))


def test_chunk_copied_keeps_values():
    source = ["p", "q"]
    chunk = NextChunk(1, NoLeakIter(source, 2)).copied()
    assert chunk.begin_idx == 1
    assert list(chunk.values) == source