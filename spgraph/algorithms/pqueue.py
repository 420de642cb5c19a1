"""Indexed binary min-heap with decrease-key.

`heapq` cannot lower the priority of an entry in place, so this heap keeps a
position index for every item and restores heap order with a single sift
after each update. Ties on priority are broken by the order in which items
reached their current priority (push or decrease), so a search pops equally
distant vertices in the order they were discovered.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, List, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)

# Heap entry layout: [priority, push_sequence, item]
_PRIORITY = 0
_SEQ = 1
_ITEM = 2


class IndexedMinHeap(Generic[K]):
    """Min-priority queue keyed by hashable items.

    Operations:
        push: O(log n)
        pop: O(log n)
        decrease: O(log n)
        priority, ``in``, ``len``: O(1)
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._pos: Dict[K, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._pos

    def push(self, item: K, priority: int) -> None:
        """Insert ``item`` with ``priority``.

        Raises:
            ValueError: If ``item`` is already queued.
        """
        if item in self._pos:
            raise ValueError(f"Item {item!r} is already in the heap.")
        entry = [priority, self._counter, item]
        self._counter += 1
        self._heap.append(entry)
        self._pos[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[K, int]:
        """Remove and return the ``(item, priority)`` with the lowest priority.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty heap")
        last = self._heap.pop()
        if self._heap:
            top = self._heap[0]
            self._heap[0] = last
            self._pos[last[_ITEM]] = 0
            self._sift_down(0)
        else:
            top = last
        del self._pos[top[_ITEM]]
        return top[_ITEM], top[_PRIORITY]

    def peek(self) -> Tuple[K, int]:
        """Return the lowest-priority ``(item, priority)`` without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty heap")
        top = self._heap[0]
        return top[_ITEM], top[_PRIORITY]

    def priority(self, item: K) -> int:
        """Current priority of a queued item.

        Raises:
            KeyError: If ``item`` is not queued.
        """
        return self._heap[self._pos[item]][_PRIORITY]

    def decrease(self, item: K, priority: int) -> None:
        """Lower the priority of a queued item in place.

        Raises:
            KeyError: If ``item`` is not queued.
            ValueError: If ``priority`` is greater than the current one.
        """
        idx = self._pos[item]
        entry = self._heap[idx]
        if priority > entry[_PRIORITY]:
            raise ValueError(
                f"Cannot raise priority of {item!r} from {entry[_PRIORITY]} to {priority}."
            )
        entry[_PRIORITY] = priority
        # A lowered entry queues behind items already waiting at that priority.
        entry[_SEQ] = self._counter
        self._counter += 1
        self._sift_up(idx)
        self._sift_down(self._pos[item])

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (a[_PRIORITY], a[_SEQ]) < (b[_PRIORITY], b[_SEQ])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][_ITEM]] = i
        self._pos[heap[j][_ITEM]] = j

    def _sift_up(self, idx: int) -> None:
        while idx > 0:
            parent = (idx - 1) >> 1
            if not self._less(idx, parent):
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        size = len(self._heap)
        while True:
            smallest = idx
            left = 2 * idx + 1
            right = left + 1
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == idx:
                return
            self._swap(idx, smallest)
            idx = smallest
