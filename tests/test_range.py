import threading

import pytest

from coniter.next import Next
from coniter.range import ConIterOfRange

SIZE = 42


def _take_by_next(it, k):
    return [it.next() for _ in range(k)]


def _take_by_chunk(it, k):
    chunk = it.next_chunk(k)
    return [] if chunk is None else list(chunk.values)


def _take_by_chunk_x(it, k):
    chunk = it.next_chunk_x(k)
    return [] if chunk is None else list(chunk)


@pytest.mark.parametrize("k", [0, SIZE // 3, SIZE])
@pytest.mark.parametrize("taker", [_take_by_next, _take_by_chunk, _take_by_chunk_x])
@pytest.mark.parametrize("then", ["none", "exhaust", "skip_to_end", "sequential"])
def test_take_matrix(k, taker, then):
    it = ConIterOfRange(range(SIZE))
    assert taker(it, k) == list(range(k))
    assert it.try_get_len() == SIZE - k
    if then == "exhaust":
        assert list(it.values()) == list(range(k, SIZE))
        assert it.next() is None
    elif then == "skip_to_end":
        it.skip_to_end()
        assert (it.next(), it.try_get_len()) == (None, 0)
    elif then == "sequential":
        assert it.into_seq_iter() == range(k, SIZE)


@pytest.mark.parametrize("k", [0, 14])
def test_unconsumed_chunk_is_counted(k):
    it = ConIterOfRange(range(SIZE))
    chunk = it.next_chunk(k)
    assert (chunk is None) == (k == 0)
    if chunk is not None:
        assert (chunk.begin_idx, len(chunk)) == (0, k)
    assert len(it.into_seq_iter()) == SIZE - k


def test_offset_range_indices_and_values():
    it = ConIterOfRange(range(10, 20))
    assert it.next() == 10
    assert it.next_id_and_value() == Next(1, 11)
    chunk = it.next_chunk(3)
    assert chunk.begin_idx == 2
    assert list(chunk.values) == [12, 13, 14]
    assert list(it.next_chunk_x(100)) == [15, 16, 17, 18, 19]
    assert it.next_chunk_x(1) is None
    assert it.next() is None


def test_into_seq_iter_after_partial_use():
    it = ConIterOfRange(range(1024))
    _take_by_next(it, 42)
    assert len(it.next_chunk_x(32)) == 32
    assert it.into_seq_iter() == range(74, 1024)


def test_lengths():
    it = ConIterOfRange(range(4))
    assert (it.try_get_initial_len(), it.try_get_len()) == (4, 4)
    it.next()
    it.next_chunk(2)
    assert it.try_get_len() == 1
    _take_by_next(it, 2)
    assert (it.try_get_initial_len(), it.try_get_len()) == (4, 0)


def test_repr():
    it = ConIterOfRange(range(3))
    assert repr(it) == "ConIterOfRange { initial_len: 3, taken: 0, remaining: 3 }"
    it.next()
    assert repr(it) == "ConIterOfRange { initial_len: 3, taken: 1, remaining: 2 }"


def test_clone_is_independent():
    it = ConIterOfRange(range(5))
    it.next()
    twin = it.clone()
    assert _take_by_next(twin, 2) == [1, 2]
    assert it.next() == 1


def test_ids_and_values():
    assert list(ConIterOfRange(range(5, 8)).ids_and_values()) == [(0, 5), (1, 6), (2, 7)]


def test_negative_chunk_size_rejected():
    with pytest.raises(ValueError):
        ConIterOfRange(range(3)).next_chunk(-1)


def test_requires_range():
    with pytest.raises(TypeError):
        ConIterOfRange([1, 2, 3])


def test_threads_share_all_elements_once():
    it = ConIterOfRange(range(5000))
    results = []
    lock = threading.Lock()

    def worker():
        local = []
        while (chunk := it.next_chunk(7)) is not None:
            local.extend(chunk.values)
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(results) == list(range(5000))