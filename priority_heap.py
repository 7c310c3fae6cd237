from __future__ import annotations

from typing import Callable, Generic, Iterable, List, Optional, TypeVar


T = TypeVar("T")


class PriorityHeap(Generic[T]):
    """Array-backed binary heap ordered by a caller-supplied predicate.

    ``higher_priority(a, b)`` must return True when ``a`` should leave the heap
    before ``b``. Passing ``operator.lt`` gives a min-heap, ``operator.gt`` a
    max-heap. The predicate has to be a strict ordering (irreflexive and
    transitive); elements of equal priority come out in no particular order.
    """

    def __init__(
        self,
        higher_priority: Callable[[T, T], bool],
        elements: Iterable[T] = (),
    ) -> None:
        self._higher_priority = higher_priority
        self._elements: List[T] = list(elements)
        self._build_heap()

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"PriorityHeap(count={len(self._elements)})"

    def is_empty(self) -> bool:
        return not self._elements

    def count(self) -> int:
        return len(self._elements)

    def peek(self) -> Optional[T]:
        """Return the highest-priority element without removing it."""
        if not self._elements:
            return None
        return self._elements[0]

    def enqueue(self, element: T) -> None:
        self._elements.append(element)
        self._sift_up(len(self._elements) - 1)

    def dequeue(self) -> Optional[T]:
        """Remove and return the highest-priority element, or None when empty."""
        if not self._elements:
            return None
        self._swap(0, len(self._elements) - 1)
        element = self._elements.pop()
        if self._elements:
            self._sift_down(0)
        return element

    @staticmethod
    def _parent_index(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left_child_index(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right_child_index(index: int) -> int:
        return 2 * index + 2

    def _is_higher_priority(self, first: int, second: int) -> bool:
        return self._higher_priority(self._elements[first], self._elements[second])

    def _highest_priority_index(self, parent: int) -> int:
        """Pick whichever of parent, left child and right child ranks first."""
        best = parent
        for child in (self._left_child_index(parent), self._right_child_index(parent)):
            if child < len(self._elements) and self._is_higher_priority(child, best):
                best = child
        return best

    def _swap(self, index: int, other: int) -> None:
        if index == other:
            return
        elements = self._elements
        elements[index], elements[other] = elements[other], elements[index]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent_index(index)
            if not self._is_higher_priority(index, parent):
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            child = self._highest_priority_index(index)
            if child == index:
                return
            self._swap(index, child)
            index = child

    def _build_heap(self) -> None:
        for index in reversed(range(len(self._elements) // 2)):
            self._sift_down(index)
