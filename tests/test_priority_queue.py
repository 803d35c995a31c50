import random

import pytest

from wayfinder.pathfinding.errors import EmptyQueueError, PathfindingError
from wayfinder.pathfinding.priority_queue import PriorityQueue


def _assert_heap_property(queue: PriorityQueue) -> None:
    data = queue._data
    assert data[0] is None
    for i in range(1, len(data)):
        for child in (2 * i, 2 * i + 1):
            if child < len(data):
                assert data[i][1] <= data[child][1]


def test_new_queue_is_empty():
    q = PriorityQueue()
    assert q.empty()
    assert len(q) == 0
    assert not q


def test_pop_returns_lowest_priority_first():
    q = PriorityQueue()
    for element, priority in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
        q.insert(element, priority)
    assert [q.pop() for _ in range(4)] == ["a", "b", "c", "d"]
    assert q.empty()


def test_same_element_can_be_inserted_twice():
    q = PriorityQueue()
    q.insert("x", 5)
    q.insert("x", 2)
    q.insert("y", 3)
    assert len(q) == 3
    assert [q.pop(), q.pop(), q.pop()] == ["x", "y", "x"]


def test_equal_children_prefer_right():
    q = PriorityQueue()
    q.insert("a", 0)
    q.insert("b", 5)
    q.insert("c", 5)
    q.insert("d", 9)
    assert [q.pop() for _ in range(4)] == ["a", "c", "b", "d"]


def test_pop_empty_raises():
    q = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        q.pop()
    with pytest.raises(IndexError):
        q.peek()
    assert issubclass(EmptyQueueError, PathfindingError)


def test_peek_does_not_remove():
    q = PriorityQueue()
    q.insert("b", 2)
    q.insert("a", 1)
    assert q.peek() == "a"
    assert len(q) == 2


def test_clear_discards_entries():
    q = PriorityQueue()
    q.insert("a", 1)
    q.insert("b", 2)
    q.clear()
    assert q.empty()
    q.insert("c", 0)
    assert q.pop() == "c"


def test_heap_property_holds_under_mixed_operations():
    rng = random.Random(1234)
    q = PriorityQueue()
    for step in range(500):
        if q and rng.random() < 0.4:
            q.pop()
        else:
            q.insert(step, rng.randint(0, 50))
        _assert_heap_property(q)


def test_pops_are_non_decreasing():
    rng = random.Random(42)
    q = PriorityQueue()
    priorities = [rng.uniform(0, 100) for _ in range(200)]
    for i, p in enumerate(priorities):
        q.insert(i, p)
    popped = []
    while not q.empty():
        popped.append(priorities[q.pop()])
    assert popped == sorted(priorities)
