"""Tests for the predicate-ordered binary heap."""
import operator
import random

import pytest

from priority_heap import PriorityHeap


def drain(heap):
    items = []
    while not heap.is_empty():
        items.append(heap.dequeue())
    return items


def test_empty_heap() -> None:
    heap = PriorityHeap(operator.lt)

    assert heap.is_empty()
    assert heap.count() == 0
    assert len(heap) == 0
    assert heap.peek() is None
    assert heap.dequeue() is None


def test_single_element() -> None:
    heap = PriorityHeap(operator.lt)
    heap.enqueue(7)

    assert heap.peek() == 7
    assert heap.count() == 1
    assert heap.dequeue() == 7
    assert heap.is_empty()


def test_peek_does_not_remove() -> None:
    heap = PriorityHeap(operator.lt)
    for value in (5, 3, 8):
        heap.enqueue(value)

    assert heap.peek() == 3
    assert heap.peek() == 3
    assert heap.count() == 3


@pytest.mark.parametrize("seed", range(5))
def test_min_heap_drains_in_ascending_order(seed: int) -> None:
    rng = random.Random(seed)
    values = [rng.randint(0, 50) for _ in range(40)]
    heap = PriorityHeap(operator.lt)
    for value in values:
        heap.enqueue(value)

    assert drain(heap) == sorted(values)


def test_max_heap_from_predicate_direction() -> None:
    heap = PriorityHeap(operator.gt)
    for value in (4, 9, 1, 7, 3):
        heap.enqueue(value)

    assert drain(heap) == [9, 7, 4, 3, 1]


def test_initial_elements_are_heapified() -> None:
    heap = PriorityHeap(operator.lt, elements=[9, 2, 7, 1, 8, 3])

    assert heap.count() == 6
    assert heap.peek() == 1
    assert drain(heap) == [1, 2, 3, 7, 8, 9]


def test_predicate_on_records() -> None:
    heap = PriorityHeap(lambda a, b: a[0] < b[0])
    heap.enqueue((3, "c"))
    heap.enqueue((1, "a"))
    heap.enqueue((2, "b"))

    assert [label for _, label in drain(heap)] == ["a", "b", "c"]


@pytest.mark.parametrize("seed", range(5))
def test_interleaved_operations_keep_order_and_size(seed: int) -> None:
    rng = random.Random(seed)
    heap = PriorityHeap(operator.lt)
    remaining = []
    enqueued = dequeued = 0

    for _ in range(200):
        if remaining and rng.random() < 0.4:
            value = heap.dequeue()
            dequeued += 1
            assert value == min(remaining)
            remaining.remove(value)
        else:
            value = rng.randint(-20, 20)
            heap.enqueue(value)
            enqueued += 1
            remaining.append(value)

        assert heap.count() == enqueued - dequeued
        assert heap.peek() == (min(remaining) if remaining else None)


def test_equal_priorities_all_come_out() -> None:
    heap = PriorityHeap(lambda a, b: a[0] < b[0])
    items = [(1, name) for name in "abcde"]
    for item in items:
        heap.enqueue(item)

    assert sorted(drain(heap)) == items
