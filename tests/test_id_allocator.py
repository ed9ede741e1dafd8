import threading

import pytest

from definitions import ID_MAX
from id_allocator import IdAllocator


def test_sequential_ids_start_at_zero(allocator):
    assert allocator.current_value() == 0
    assert [allocator.next_id() for _ in range(100)] == list(range(100))
    assert allocator.current_value() == 100


def test_current_value_has_no_side_effect(allocator):
    allocator.next_id()
    assert allocator.current_value() == 1
    assert allocator.current_value() == 1
    assert allocator.next_id() == 1


def test_allocators_are_independent():
    a, b = IdAllocator(), IdAllocator()
    a.next_id()
    a.next_id()
    assert b.next_id() == 0


def test_concurrent_ids_are_unique_and_gapless(allocator):
    threads_count, per_thread = 8, 2000
    results = [[] for _ in range(threads_count)]
    barrier = threading.Barrier(threads_count)

    def worker(out):
        barrier.wait()
        for _ in range(per_thread):
            out.append(allocator.next_id())

    threads = [threading.Thread(target=worker, args=(out,)) for out in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    issued = [i for out in results for i in out]
    total = threads_count * per_thread
    assert len(set(issued)) == total
    assert set(issued) == set(range(total))
    assert allocator.current_value() == total
    # each thread sees its own ids in increasing order
    for out in results:
        assert out == sorted(out)


def test_exhausting_32_bit_space():
    allocator = IdAllocator(start=ID_MAX)
    assert allocator.next_id() == ID_MAX
    with pytest.raises(OverflowError):
        allocator.next_id()
    assert allocator.current_value() == 1
