"""A bounded collection keeping only the highest-weighted items."""

from __future__ import annotations

import bisect
import threading
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_CAPACITY = 100


@dataclass(frozen=True)
class Item(Generic[T]):
    """A value paired with its weight."""

    value: T
    weight: float


class Items(Generic[T]):
    """Tracks up to ``capacity`` items of weight at least ``min_match``, heaviest first."""

    def __init__(self, capacity: int, min_match: float) -> None:
        if min_match <= 0.001:
            min_match = 0.01
        if capacity < 0 or capacity > MAX_CAPACITY:
            capacity = MAX_CAPACITY
        self.capacity = capacity
        self.min_match = min_match
        self._items: list[Item[T]] = []
        self._lock = threading.Lock()

    def add(self, item: Item[T]) -> None:
        """Insert ``item`` if it qualifies, dropping the lightest item when full."""
        if item.weight < self.min_match:
            return

        with self._lock:
            if len(self._items) < self.capacity:
                self._insert(item)
                return
            if not self._items or item.weight <= self._items[-1].weight:
                return
            self._items.pop()
            self._insert(item)

    def _insert(self, item: Item[T]) -> None:
        # Equal weights keep insertion order: the new item goes after them.
        pos = bisect.bisect_right(self._items, -item.weight, key=lambda it: -it.weight)
        self._items.insert(pos, item)

    def items(self) -> list[Item[T]]:
        """Return a copy of the stored items in descending weight order."""
        with self._lock:
            return list(self._items)