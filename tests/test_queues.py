from dataclasses import dataclass
from typing import Optional

from grid import Direction
from pathfinding.queues import FIFOQueue, SortedQueue


@dataclass
class Item:
    tag: str
    weight: int
    last: Optional[Direction] = None

    def weigh(self):
        return self.weight

    def direction(self):
        return self.last


def drain(q):
    out = []
    while True:
        item = q.dequeue()
        if item is None:
            return out
        out.append(item)


def test_fifo_order():
    q = FIFOQueue()
    for i in range(5):
        q.enqueue(i)
    assert len(q) == 5
    assert drain(q) == [0, 1, 2, 3, 4]
    assert q.dequeue() is None
    assert len(q) == 0


def test_sorted_queue_orders_by_weight():
    q = SortedQueue()
    for tag, w in [("c", 7), ("a", 1), ("b", 3)]:
        q.enqueue(Item(tag, w))
    assert [i.tag for i in drain(q)] == ["a", "b", "c"]


def test_sorted_queue_breaks_ties_by_direction():
    q = SortedQueue()
    q.enqueue(Item("right", 5, Direction.RIGHT))
    q.enqueue(Item("down", 5, Direction.DOWN))
    q.enqueue(Item("left", 5, Direction.LEFT))
    q.enqueue(Item("up", 5, Direction.UP))
    q.enqueue(Item("start", 5, None))
    assert [i.tag for i in drain(q)] == ["start", "up", "left", "down", "right"]


def test_sorted_queue_full_ties_are_first_in_first_out():
    q = SortedQueue()
    for tag in "xyz":
        q.enqueue(Item(tag, 2, Direction.LEFT))
    assert [i.tag for i in drain(q)] == ["x", "y", "z"]


def test_empty_queues_return_none():
    assert FIFOQueue().dequeue() is None
    assert SortedQueue().dequeue() is None


def test_clear_empties_both_queues():
    fifo = FIFOQueue()
    fifo.enqueue(1)
    sorted_q = SortedQueue()
    sorted_q.enqueue(Item("a", 1))
    fifo.clear()
    sorted_q.clear()
    assert len(fifo) == len(sorted_q) == 0
    assert fifo.dequeue() is None and sorted_q.dequeue() is None
