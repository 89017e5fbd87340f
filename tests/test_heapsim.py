import pytest

from heaplayers.heapsim import InvalidAddressError, SimulatedHeap


def test_malloc_returns_distinct_aligned_nonzero_addresses():
    heap = SimulatedHeap()
    addresses = [heap.malloc(size) for size in (0, 1, 7, 100, 3)]
    assert len(set(addresses)) == len(addresses)
    assert all(a > 0 and a % 16 == 0 for a in addresses)


def test_blocks_do_not_overlap():
    heap = SimulatedHeap()
    a = heap.malloc(40)
    b = heap.malloc(40)
    assert b >= a + 40


def test_write_read_round_trip():
    heap = SimulatedHeap()
    a = heap.malloc(10)
    heap.write(a, b"0123456789")
    assert heap.read(a, 10) == b"0123456789"
    assert heap.read(a + 3, 4) == b"3456"


def test_new_block_is_zeroed():
    heap = SimulatedHeap()
    a = heap.malloc(5)
    assert heap.read(a, 5) == bytes(5)


def test_get_size_and_live_count():
    heap = SimulatedHeap()
    a = heap.malloc(24)
    b = heap.malloc(3)
    assert heap.get_size(a) == 24
    assert heap.get_size(b) == 3
    assert heap.live_count() == 2
    heap.free(a)
    assert heap.live_count() == 1


def test_double_free_raises():
    heap = SimulatedHeap()
    a = heap.malloc(8)
    heap.free(a)
    with pytest.raises(InvalidAddressError):
        heap.free(a)


def test_free_null_is_noop():
    heap = SimulatedHeap()
    heap.malloc(8)
    heap.free(0)
    assert heap.live_count() == 1


def test_read_past_block_raises():
    heap = SimulatedHeap()
    a = heap.malloc(4)
    with pytest.raises(InvalidAddressError):
        heap.read(a, 5)
    with pytest.raises(InvalidAddressError):
        heap.write(a + 2, b"abc")


def test_access_after_free_raises():
    heap = SimulatedHeap()
    a = heap.malloc(4)
    heap.free(a)
    with pytest.raises(InvalidAddressError):
        heap.read(a, 1)
    with pytest.raises(InvalidAddressError):
        heap.get_size(a)


def test_negative_size_raises():
    heap = SimulatedHeap()
    with pytest.raises(ValueError):
        heap.malloc(-1)


def test_bad_alignment_raises():
    with pytest.raises(ValueError):
        SimulatedHeap(alignment=12)