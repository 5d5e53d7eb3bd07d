# pathfinding/queues.py
from __future__ import annotations

from collections import deque
from heapq import heappush, heappop
from itertools import count
from typing import Deque, Generic, List, Optional, Protocol, Tuple, TypeVar

from grid import Direction

T = TypeVar("T")


class Weighted(Protocol):
    def weigh(self) -> int:
        ...

    def direction(self) -> Optional[Direction]:
        ...


class QueueStrategy(Protocol[T]):
    def enqueue(self, item: T) -> None:
        ...

    def dequeue(self) -> Optional[T]:
        ...

    def clear(self) -> None:
        ...

    def __len__(self) -> int:
        ...


class FIFOQueue(Generic[T]):
    """First in, first out."""

    def __init__(self) -> None:
        self._buffer: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        self._buffer.append(item)

    def dequeue(self) -> Optional[T]:
        if not self._buffer:
            return None
        return self._buffer.popleft()

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)


def _direction_rank(direction: Optional[Direction]) -> int:
    # The start cursor has no move yet and sorts ahead of every direction.
    return -1 if direction is None else int(direction)


class SortedQueue(Generic[T]):
    """
    Min-priority queue over weigh().

    Equal weights are resolved by the last move, Up before Left before Down
    before Right; anything still tied comes out in insertion order.
    Both operations are O(log n).
    """

    def __init__(self) -> None:
        # heap entries: (weight, direction rank, insertion counter, item)
        self._heap: List[Tuple[int, int, int, T]] = []
        self._counter = count()

    def enqueue(self, item: T) -> None:
        key = (item.weigh(), _direction_rank(item.direction()), next(self._counter))
        heappush(self._heap, (*key, item))

    def dequeue(self) -> Optional[T]:
        if not self._heap:
            return None
        return heappop(self._heap)[-1]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)
