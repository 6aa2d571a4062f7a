import pytest

from miku.arena import Arena


def test_minimum_capacity_is_one_page():
    assert Arena(100).capacity() == 4096


def test_larger_initial_size_is_kept():
    assert Arena(10000).capacity() == 10000


def test_alloc_returns_requested_length_and_tracks_usage():
    arena = Arena()
    view = arena.alloc(10)
    assert len(view) == 10
    assert arena.used() == 10


def test_allocations_do_not_overlap():
    arena = Arena()
    first = arena.alloc(16)
    second = arena.alloc(16)
    first[:] = b"a" * 16
    second[:] = b"b" * 16
    assert bytes(first) == b"a" * 16
    assert bytes(second) == b"b" * 16


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        Arena().alloc(0)


def test_oversized_allocation_adds_block():
    arena = Arena()
    before = arena.capacity()
    view = arena.alloc(5000)
    assert len(view) == 5000
    assert arena.capacity() > before
    assert arena.capacity() % 4096 == 0
    assert arena.used() == 5000


def test_filling_block_grows_capacity():
    arena = Arena()
    for _ in range(10):
        arena.alloc(1000)
    assert arena.capacity() > 4096
    assert arena.used() == 10 * 1000


def test_alloc_aligned_reserves_slack():
    arena = Arena()
    arena.alloc(3)
    view = arena.alloc_aligned(10, 64)
    assert len(view) == 10
    assert arena.used() == 3 + 10 + 64 - 1


def test_alloc_aligned_rejects_bad_alignment():
    with pytest.raises(ValueError):
        Arena().alloc_aligned(10, 3)


def test_reset_clears_usage_but_keeps_capacity():
    arena = Arena()
    arena.alloc(5000)
    capacity = arena.capacity()
    arena.reset()
    assert arena.used() == 0
    assert arena.capacity() == capacity
    view = arena.alloc(8)
    assert len(view) == 8
    assert arena.used() == 8