"""An array that grows to fit any index assigned to it."""

from __future__ import annotations

from typing import Any, Optional


class DynamicArray:
    """A growable array.

    Assigning past the end grows the storage to ``index * 2 + 1`` slots;
    :meth:`trim` halves it when the client's element count drops below a
    quarter of the capacity. Unused slots hold ``default``, which should be
    immutable since it is shared between slots.
    """

    def __init__(self, default: Any = None) -> None:
        self._default = default
        self._items: Optional[list[Any]] = None

    def clear(self) -> None:
        """Release the whole array."""
        self._items = None

    def capacity(self) -> int:
        return 0 if self._items is None else len(self._items)

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self.capacity():
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        if index >= self.capacity():
            grown = [self._default] * (index * 2 + 1)
            if self._items is not None:
                grown[: len(self._items)] = self._items
            self._items = grown
        self._items[index] = value

    def trim(self, nelts: int) -> None:
        """Declare that only the first ``nelts`` elements are in use."""
        if nelts < 0:
            raise ValueError("element count must be non-negative")
        if self._items is None:
            return
        if nelts * 4 < len(self._items):
            new_size = nelts * 2
            self._items = self._items[:nelts] + [self._default] * (new_size - nelts)
        if nelts > len(self._items):
            raise ValueError(f"{nelts} elements exceed capacity {len(self._items)}")