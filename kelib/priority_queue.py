"""Binary-heap priority queue with a custom ordering."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Priority queue on a binary heap.

    is_higher_priority(a, b) returns whether a should be dequeued before b;
    the default dequeues the smallest item first.
    """

    def __init__(self, is_higher_priority: Callable[[T, T], bool] | None = None) -> None:
        self._impl: list[T] = []
        self._higher = is_higher_priority if is_higher_priority is not None else operator.lt

    def add(self, item: T) -> None:
        self._impl.append(item)
        if len(self._impl) > 1:
            self._propagate_up(len(self._impl) - 1)

    def empty(self) -> bool:
        return not self._impl

    def __len__(self) -> int:
        return len(self._impl)

    def peek(self) -> T:
        if not self._impl:
            raise IndexError("peek at an empty priority queue")
        return self._impl[0]

    def pop(self) -> T:
        if not self._impl:
            raise IndexError("pop from an empty priority queue")
        top = self._impl[0]
        last = self._impl.pop()
        if self._impl:
            self._impl[0] = last
            self._propagate_down(0)
        return top

    def _propagate_up(self, cursor: int) -> None:
        heap = self._impl
        key = heap[cursor]
        while cursor:
            parent = (cursor - 1) // 2
            if not self._higher(key, heap[parent]):
                break
            heap[cursor] = heap[parent]
            cursor = parent
        heap[cursor] = key

    def _propagate_down(self, cursor: int) -> None:
        heap = self._impl
        size = len(heap)
        while (left := cursor * 2 + 1) < size:
            best = left
            right = left + 1
            if right < size and self._higher(heap[right], heap[best]):
                best = right
            if not self._higher(heap[best], heap[cursor]):
                break
            heap[best], heap[cursor] = heap[cursor], heap[best]
            cursor = best