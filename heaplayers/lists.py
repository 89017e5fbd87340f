"""Intrusive linked lists whose entries carry their own links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class DLEntry:
    """An entry of a doubly-linked list; ``value`` is an optional payload."""

    __slots__ = ("prev", "next", "value", "__weakref__", "__dict__")

    def __init__(self, value: Any = None) -> None:
        self.prev: Optional[DLEntry] = None
        self.next: Optional[DLEntry] = None
        self.value = value


class DLList:
    """A circular doubly-linked list with a sentinel head; insertion is at the front."""

    def __init__(self) -> None:
        self._head = DLEntry()
        self.clear()

    def clear(self) -> None:
        self._head.prev = self._head
        self._head.next = self._head

    def is_empty(self) -> bool:
        return self._head.next is self._head

    def get(self) -> Optional[DLEntry]:
        """Unlink and return the first entry, or None if the list is empty."""
        entry = self._head.next
        if entry is self._head:
            return None
        self._head.next = entry.next
        entry.next.prev = self._head
        return entry

    def remove(self, entry: DLEntry) -> None:
        entry.prev.next = entry.next
        entry.next.prev = entry.prev

    def insert(self, entry: DLEntry) -> None:
        first = self._head.next
        entry.prev = self._head
        entry.next = first
        self._head.next = entry
        first.prev = entry

    def __iter__(self) -> Iterator[DLEntry]:
        entry = self._head.next
        while entry is not self._head:
            following = entry.next
            yield entry
            entry = following

    def __len__(self) -> int:
        return sum(1 for _ in self)


class SLEntry:
    """An entry of a singly-linked list; ``value`` is an optional payload."""

    __slots__ = ("next", "value", "__weakref__", "__dict__")

    def __init__(self, value: Any = None) -> None:
        self.next: Optional[SLEntry] = None
        self.value = value


class SLList:
    """A singly-linked LIFO list; insertion and removal are at the front."""

    def __init__(self) -> None:
        self._head = SLEntry()

    def clear(self) -> None:
        self._head.next = None

    def is_empty(self) -> bool:
        return self._head.next is None

    def get(self) -> Optional[SLEntry]:
        entry = self._head.next
        if entry is None:
            return None
        self._head.next = entry.next
        return entry

    def insert(self, entry: SLEntry) -> None:
        entry.next = self._head.next
        self._head.next = entry

    def __iter__(self) -> Iterator[SLEntry]:
        entry = self._head.next
        while entry is not None:
            following = entry.next
            yield entry
            entry = following

    def __len__(self) -> int:
        return sum(1 for _ in self)


class FreeSLList:
    """A singly-linked free list threaded through the freed entries themselves."""

    def __init__(self) -> None:
        self._head = SLEntry()

    def clear(self) -> None:
        self._head.next = None

    def get(self) -> Optional[SLEntry]:
        entry = self._head.next
        if entry is None:
            return None
        self._head.next = entry.next
        return entry

    def remove(self) -> Optional[SLEntry]:
        """Same as :meth:`get`: take the first entry off the list."""
        return self.get()

    def insert(self, entry: SLEntry) -> None:
        entry.next = self._head.next
        self._head.next = entry