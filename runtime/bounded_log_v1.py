from __future__ import annotations

"""Bounded append logs (engine-safe, deterministic).

Append-only, capacity-bounded stores for long-lived user marks (ripples,
line marks). Once full, each push evicts the single oldest entry.
"""

from collections import deque
from typing import Deque, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class BoundedLogV1(Generic[T]):
    """FIFO-evicting log backed by a ring (deque with maxlen)."""

    def __init__(self, capacity: int):
        if int(capacity) < 1:
            raise ValueError("BoundedLogV1: capacity must be >= 1")
        self.capacity = int(capacity)
        self._items: Deque[T] = deque(maxlen=self.capacity)

    def push(self, item: T) -> None:
        self._items.append(item)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def list(self) -> List[T]:
        return list(self._items)
