"""Lazily created, process-wide single instances of classes."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_instances: dict[type, Any] = {}
_lock = threading.Lock()


def get_instance(cls: type[T]) -> T:
    """Return the one instance of ``cls``, creating it on first use."""
    try:
        return _instances[cls]
    except KeyError:
        pass
    with _lock:
        if cls not in _instances:
            _instances[cls] = cls()
        return _instances[cls]


class ExactlyOne(Generic[T]):
    """Accessor for the single instance of a class, obtained by calling it."""

    def __init__(self, cls: type[T]) -> None:
        self._cls = cls

    def __call__(self) -> T:
        return get_instance(self._cls)