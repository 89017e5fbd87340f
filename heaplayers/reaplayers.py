"""Heap layers that build reaps: region semantics, headers and recycling.

Each layer wraps another heap object (its *super heap*) that provides
``malloc(size)`` returning an address, or ``None`` when it has no memory,
plus whatever other operations the layer forwards to it.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import Any, NamedTuple, Optional

_HEADER = struct.Struct("<QQ")

HEADER_SIZE = _HEADER.size
"""Size in bytes of a two-word object header."""


class AddHeader:
    """Prefixes every object with a header of (previous size, size).

    The header is laid out as two little-endian 64-bit words directly before
    the address handed back, so the super heap must support ``write``.
    Objects from this layer cannot be freed individually, only cleared.
    """

    def __init__(self, heap: Any) -> None:
        self.heap = heap
        self._prev_size = HEADER_SIZE

    def malloc(self, size: int) -> Optional[int]:
        """Allocate ``size`` bytes behind a fresh header."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        header = _HEADER.pack(self._prev_size, size)
        self._prev_size = size
        address = self.heap.malloc(size + HEADER_SIZE)
        if address is None:
            return None
        self.heap.write(address, header)
        return address + HEADER_SIZE

    def clear(self) -> None:
        """Forget the size chain and clear the super heap."""
        self._prev_size = HEADER_SIZE
        self.heap.clear()


class ClearOptimizeHeap:
    """Serves fresh memory from ``heap1`` until something is freed.

    Once an object has been freed, requests go to ``heap2`` (which holds the
    recycled objects); when it comes back empty it is taken to be exhausted
    and allocation returns to ``heap1``.
    """

    def __init__(self, heap1: Any, heap2: Any) -> None:
        self.heap1 = heap1
        self.heap2 = heap2
        self._nothing_on_heap = True

    @property
    def nothing_on_heap(self) -> bool:
        """True iff there is believed to be nothing to recycle in ``heap2``."""
        return self._nothing_on_heap

    def malloc(self, size: int) -> Optional[int]:
        if self._nothing_on_heap:
            return self.heap1.malloc(size)
        address = self.heap2.malloc(size)
        if address is None:
            self._nothing_on_heap = True
            address = self.heap1.malloc(size)
        return address

    def free(self, address: int) -> None:
        self._nothing_on_heap = False
        self.heap2.free(address)

    def remove(self, address: int) -> Any:
        return self.heap2.remove(address)

    def clear(self) -> None:
        self.heap1.clear()
        if not self._nothing_on_heap:
            self.heap2.clear()
        self._nothing_on_heap = True

    def get_size(self, address: int) -> int:
        return self.heap2.get_size(address)


class _Record(NamedTuple):
    start: int
    end: int


class RegionHeap:
    """Gives region semantics to a heap: objects are released only by :meth:`clear`.

    Each request reserves ``HEADER_SIZE`` extra bytes at the end of the
    object, leaving the start of the object free to be overwritten with
    boundary tags by a coalescing heap. Leaving a ``with`` block clears it.
    """

    def __init__(self, heap: Any) -> None:
        self.heap = heap
        self._records: list[_Record] = []

    def malloc(self, size: int) -> Optional[int]:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        address = self.heap.malloc(size + HEADER_SIZE)
        if address is None:
            return None
        self._records.append(_Record(address, address + size))
        return address

    def _newest_first(self) -> Iterator[_Record]:
        return reversed(self._records)

    def find(self, address: int) -> bool:
        """True iff ``address`` lies inside one of this region's objects."""
        return any(
            record.start <= address < record.end for record in self._newest_first()
        )

    def clear(self) -> None:
        """Release every object, newest first."""
        while self._records:
            self.heap.free(self._records.pop().start)

    def free(self, address: int) -> None:
        """Individual frees are ignored; memory returns only on :meth:`clear`."""

    def __len__(self) -> int:
        return len(self._records)

    def __enter__(self) -> "RegionHeap":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()