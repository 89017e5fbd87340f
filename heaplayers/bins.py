"""Size-class tables mapping request sizes to allocator bins."""

from __future__ import annotations

from .mathutil import check_power_of_two, ilog2

MAX_ALIGN = 16
"""Alignment of the most strictly aligned fundamental type."""

MAX_ALIGN_SIZE = 32
"""Size of the largest fundamental type."""


def _floor_log2(n: int) -> int:
    return n.bit_length() - 1 if n > 1 else 0


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


class PowerOfTwoBins:
    """Generic power-of-two bins for a chunk of ``size`` bytes."""

    def __init__(self, size: int, max_align: int = MAX_ALIGN) -> None:
        check_power_of_two(max_align)
        self.max_align = max_align
        self.big_object = size // 8
        if self.big_object <= 0:
            raise ValueError("BIG_OBJECT must be positive")
        self.max_object_size = self.big_object
        self.num_bins = ilog2(size) - ilog2(max_align) + 1
        self.log_max_align = _floor_log2(max_align)

    def size_class(self, size: int) -> int:
        _check_size(size)
        size = max(size, self.max_align)
        return ilog2(size) - self.log_max_align

    def class_size(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"size class {index} out of range")
        return self.max_align << index

    def class_max_size(self, index: int) -> int:
        return self.class_size(index)


_BINS_4K = (
    8, 16, 24, 32, 40, 48, 56, 64, 72, 80, 88, 96, 104, 112, 120, 128,
    152, 176, 208, 248, 296, 352, 416, 496, 592, 704, 856, 1024, 1224,
    1712, 2048, 3416,
)


class Bins4K:
    """Hand-tuned size classes for 4K chunks carrying a header of ``header_size`` bytes."""

    num_bins = 33

    def __init__(self, header_size: int = 0) -> None:
        if header_size < 0:
            raise ValueError("header size must be non-negative")
        self.big_object = 4096 - header_size
        if self.big_object <= 0:
            raise ValueError("BIG_OBJECT must be positive")
        self._bins = (*_BINS_4K, self.big_object)

    def size_class(self, size: int) -> int:
        _check_size(size)
        if size > self.big_object:
            raise ValueError(f"size {size} exceeds largest object {self.big_object}")
        if size < 8:
            return 0
        if size <= 128:
            return ((size + 7) >> 3) - 1
        return next(i for i, bin_size in enumerate(self._bins) if bin_size >= size)

    def class_size(self, index: int) -> int:
        if not 0 <= index < self.num_bins:
            raise IndexError(f"size class {index} out of range")
        return self._bins[index]


class Bins64K:
    """Power-of-two size classes from 8 bytes up to 8K, for 64K chunks."""

    big_object = 8192
    num_bins = 11

    def size_class(self, size: int) -> int:
        _check_size(size)
        size = max(size, 8)
        return ilog2(size) - 3

    def class_size(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"size class {index} out of range")
        return 8 << index


class BinsPow2:
    """Power-of-two size classes from ``min_size`` up to ``max_size``."""

    def __init__(self, max_size: int, min_size: int = MAX_ALIGN_SIZE) -> None:
        if max_size <= 0:
            raise ValueError("BIG_OBJECT must be positive")
        if min_size <= 0:
            raise ValueError("minimum size must be positive")
        self.min_size = min_size
        self.big_object = max_size
        self.max_object_size = max_size
        self.num_bins = ilog2(max_size) - ilog2(min_size) + 1

    def size_class(self, size: int) -> int:
        _check_size(size)
        size = max(size, self.min_size)
        return ilog2(size) - ilog2(self.min_size)

    def class_size(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"size class {index} out of range")
        return self.min_size << index

    def class_max_size(self, index: int) -> int:
        return self.class_size(index)