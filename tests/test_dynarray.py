import pytest

from heaplayers.dynarray import DynamicArray


def test_empty_array():
    arr = DynamicArray()
    assert arr.capacity() == 0
    with pytest.raises(IndexError):
        arr[0]


def test_first_assignment_capacity():
    arr = DynamicArray()
    arr[0] = "x"
    assert arr.capacity() == 1
    assert arr[0] == "x"


def test_growth_preserves_values():
    arr = DynamicArray(default=0)
    for i in range(50):
        arr[i] = i * i
        assert arr.capacity() > i
    assert [arr[i] for i in range(50)] == [i * i for i in range(50)]


def test_growth_fills_with_default():
    arr = DynamicArray(default=-1)
    arr[10] = "v"
    assert arr[10] == "v"
    assert all(arr[i] == -1 for i in range(arr.capacity()) if i != 10)


def test_growth_at_least_doubles():
    arr = DynamicArray()
    arr[7] = 1
    assert arr.capacity() >= 2 * 7


def test_negative_index():
    arr = DynamicArray()
    arr[3] = 1
    capacity = arr.capacity()
    with pytest.raises(IndexError):
        arr[-1]
    with pytest.raises(IndexError):
        arr[-1] = 2
    assert arr[3] == 1
    assert arr.capacity() == capacity


def test_trim_shrinks_and_keeps_prefix():
    arr = DynamicArray(default=None)
    for i in range(21):
        arr[i] = i
    before = arr.capacity()
    arr.trim(3)
    after = arr.capacity()
    assert 3 <= after < before
    assert [arr[i] for i in range(3)] == [0, 1, 2]
    assert all(arr[i] is None for i in range(3, after))
    with pytest.raises(IndexError):
        arr[after]


def test_trim_without_shrink_keeps_capacity():
    arr = DynamicArray()
    for i in range(10):
        arr[i] = i
    before = arr.capacity()
    arr.trim(10)
    assert arr.capacity() == before
    assert [arr[i] for i in range(10)] == list(range(10))


def test_trim_on_empty_is_noop():
    arr = DynamicArray()
    arr.trim(5)
    assert arr.capacity() == 0


def test_trim_beyond_capacity_raises():
    arr = DynamicArray()
    arr[0] = 1
    with pytest.raises(ValueError):
        arr.trim(arr.capacity() + 1)


def test_trim_negative_raises():
    arr = DynamicArray()
    with pytest.raises(ValueError):
        arr.trim(-1)


def test_clear_releases_storage():
    arr = DynamicArray()
    arr[5] = "a"
    arr.clear()
    assert arr.capacity() == 0
    with pytest.raises(IndexError):
        arr[5]
    arr[2] = "b"
    assert arr[2] == "b"