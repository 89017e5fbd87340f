"""A region (obstack-like) allocator simulated with ordinary malloc and free."""

from __future__ import annotations

from typing import Optional

from .dynarray import DynamicArray
from .heapsim import SimulatedHeap
from .mathutil import align

_INITIAL_OBJECT_SIZE = 8
_WORD = 8
_FREED_MARK = 1


class MallocStack:
    """A stack of recorded addresses; popping may shrink its storage."""

    def __init__(self) -> None:
        self._count = 0
        self._mallocs = DynamicArray()

    def __len__(self) -> int:
        return self._count

    def push(self, address: int) -> None:
        self._count += 1
        self._mallocs[self._count] = address

    def pop(self) -> Optional[int]:
        """Remove and return the top address, or None if the stack is empty."""
        if self._count == 0:
            return None
        address = self._mallocs[self._count]
        self._count -= 1
        self._mallocs.trim(self._count + 1)
        return address

    def top(self) -> Optional[int]:
        if self._count == 0:
            return None
        return self._mallocs[self._count]

    def clear(self) -> None:
        self._count = 0
        self._mallocs.clear()


class RegionSimulator:
    """Acts like a region or obstack over a malloc/free heap.

    Every allocation is remembered so that :meth:`free_all` can release it;
    :meth:`free_after` releases everything allocated after a given address.
    A growing "current object" supports obstack-style incremental building.
    Regions form a tree: destroying or clearing a region destroys its children.
    """

    def __init__(
        self,
        heap: Optional[SimulatedHeap] = None,
        parent: Optional["RegionSimulator"] = None,
    ) -> None:
        if heap is None:
            heap = parent.heap if parent is not None else SimulatedHeap()
        self.heap = heap
        self._parent: Optional[RegionSimulator] = None
        self._children: list[RegionSimulator] = []
        self._stack = MallocStack()
        self._destroyed = False
        self._init_current_object()
        if parent is not None:
            parent.add_child(self)

    @property
    def parent(self) -> Optional["RegionSimulator"]:
        return self._parent

    @property
    def children(self) -> tuple["RegionSimulator", ...]:
        """Child regions, most recently added first."""
        return tuple(self._children)

    @property
    def current_object(self) -> int:
        return self._current

    @property
    def current_size(self) -> int:
        return self._current_size

    def _check(self) -> None:
        if self._destroyed:
            raise RuntimeError("region has been destroyed")

    def _init_current_object(self) -> None:
        self._current = self.heap.malloc(_INITIAL_OBJECT_SIZE)
        self._position = self._current
        self._current_size = 0
        self._actual_size = _INITIAL_OBJECT_SIZE
        self._exposed = False

    def malloc(self, size: int) -> int:
        """Allocate ``size`` bytes and record the allocation."""
        self._check()
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if self._exposed:
            self._grow(size - self._current_size)
            address = self._current
            self.finalize()
            return address
        address = self.heap.malloc(size)
        self._stack.push(address)
        return address

    def free_after(self, address: int) -> None:
        """Free, newest first, every allocation made after ``address``.

        If ``address`` is the current object, it alone is freed and a fresh
        current object is started.
        """
        self._check()
        if address != self._current:
            while True:
                top = self._stack.top()
                if top is None or top & ~_FREED_MARK == address:
                    break
                if not top & _FREED_MARK:
                    self.heap.free(top)
                self._stack.pop()
        else:
            self.heap.free(self._current)
            self._init_current_object()

    def free_all(self) -> None:
        """Free every recorded allocation and destroy all child regions."""
        self._check()
        while (address := self._stack.pop()) is not None:
            if not address & _FREED_MARK:
                self.heap.free(address)
        self._stack.clear()
        while self._children:
            self._children[0].destroy()

    def object_base(self) -> int:
        """Start of the object being built; marks it as exposed."""
        self._check()
        self._exposed = True
        return self._current

    def finalize(self) -> None:
        """Record the current object as an allocation and start a new one."""
        self._check()
        self._stack.push(self._current)
        self._init_current_object()

    def grow(self, size: int) -> int:
        """Extend the current object by ``size`` bytes.

        Returns the address where the new bytes begin. The object may move;
        its contents are copied when it does.
        """
        self._check()
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return self._grow(size)

    def _grow(self, size: int) -> int:
        requested = align(self._current_size + size, _WORD)
        if requested > self._actual_size:
            moved = self.heap.malloc(requested)
            self._actual_size = requested
            self.heap.write(moved, self.heap.read(self._current, self._current_size))
            self.heap.free(self._current)
            self._position = moved + (self._position - self._current)
            if self._exposed:
                # The old object is already freed; remember it only as a marker.
                self._stack.push(self._current | _FREED_MARK)
            self._current = moved
        self._exposed = False
        self._current_size += size
        old_position = self._position
        self._position += size
        return old_position

    def add_child(self, child: "RegionSimulator") -> None:
        """Make ``child``, a region without a parent, a child of this one."""
        self._check()
        if child is self:
            raise ValueError("a region cannot be its own child")
        if child._parent is not None:
            raise ValueError("region already has a parent")
        child._check()
        self._children.insert(0, child)
        child._parent = self

    def destroy(self) -> None:
        """Free everything, destroy the children and detach from the parent."""
        self.free_all()
        self.heap.free(self._current)
        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None
        self._destroyed = True