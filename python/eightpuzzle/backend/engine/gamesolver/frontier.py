"""Binary-heap priority frontier for A*."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

from eightpuzzle.backend.models.errors import EmptyFrontierError

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """Min-priority queue with FIFO tie-breaking.

    Entries are ``(priority, sequence, item)``; the monotonic sequence number
    keeps equal priorities in insertion order and means items themselves are
    never compared.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, T]] = []
        self._counter = itertools.count()

    def insert(self, item: T, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def extract_min(self) -> T:
        if not self._heap:
            raise EmptyFrontierError("extract_min() on an empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
