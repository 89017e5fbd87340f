"""A simulated heap handing out integer addresses backed by byte buffers."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from .mathutil import align, check_power_of_two


class InvalidAddressError(ValueError):
    """Raised when an address does not belong to a live block."""


class SimulatedHeap:
    """A malloc/free heap over a simulated address space.

    Addresses are positive integers aligned to ``alignment`` and are never
    reused, so a stale address is always detected. Address 0 plays the role
    of the null pointer: freeing it does nothing.
    """

    def __init__(self, alignment: int = 16, base: int = 0x1000) -> None:
        check_power_of_two(alignment)
        if base <= 0:
            raise ValueError("base address must be positive")
        self._alignment = alignment
        self._next = align(base, alignment)
        self._blocks: dict[int, bytearray] = {}
        self._starts: list[int] = []

    def malloc(self, size: int) -> int:
        """Allocate ``size`` zeroed bytes and return the block's address."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        address = self._next
        self._next = align(address + max(size, 1), self._alignment)
        self._blocks[address] = bytearray(size)
        self._starts.append(address)
        return address

    def free(self, address: int) -> None:
        """Release the block starting at ``address``."""
        if address == 0:
            return
        if self._blocks.pop(address, None) is None:
            raise InvalidAddressError(f"address {address:#x} is not a live block")
        del self._starts[bisect_left(self._starts, address)]

    def get_size(self, address: int) -> int:
        """The requested size of the block starting at ``address``."""
        try:
            return len(self._blocks[address])
        except KeyError:
            raise InvalidAddressError(
                f"address {address:#x} is not a live block"
            ) from None

    def _locate(self, address: int, size: int) -> tuple[bytearray, int]:
        index = bisect_right(self._starts, address) - 1
        if index < 0:
            raise InvalidAddressError(f"address {address:#x} is not in any block")
        start = self._starts[index]
        block = self._blocks[start]
        offset = address - start
        if offset + size > len(block):
            raise InvalidAddressError(
                f"{size} bytes at {address:#x} run past the block at {start:#x}"
            )
        return block, offset

    def read(self, address: int, size: int) -> bytes:
        """Read ``size`` bytes starting at ``address`` (which may be interior)."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        block, offset = self._locate(address, size)
        return bytes(block[offset : offset + size])

    def write(self, address: int, data: bytes) -> None:
        """Copy ``data`` into memory starting at ``address``."""
        block, offset = self._locate(address, len(data))
        block[offset : offset + len(data)] = data

    def live_count(self) -> int:
        """Number of blocks allocated and not yet freed."""
        return len(self._blocks)