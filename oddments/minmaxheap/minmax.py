"""A double-ended priority queue: a min heap and a max heap sharing their entries."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from oddments.minmaxheap.heap import Entry, Heap, HeapOrder
from oddments.minmaxheap.peek import PeekMut

T = TypeVar("T")


class MinMaxBinaryHeap(Generic[T]):
    """A collection giving quick access to both its smallest and largest element.

    ``min_heap`` and ``max_heap`` hold the same entries; each entry records its
    index in both, so an element removed from one heap is removed from the
    other without searching.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self.min_heap: Heap[T] = Heap(HeapOrder.MIN)
        self.max_heap: Heap[T] = Heap(HeapOrder.MAX)
        if iterable is not None:
            self.extend(iterable)

    def _heaps(self, order: HeapOrder) -> Tuple[Heap[T], Heap[T]]:
        if order is HeapOrder.MIN:
            return self.min_heap, self.max_heap
        return self.max_heap, self.min_heap

    def __len__(self) -> int:
        return len(self.max_heap)

    def __bool__(self) -> bool:
        return len(self.max_heap) > 0

    def __iter__(self) -> Iterator[T]:
        """The elements in storage order; the first one is the largest."""
        return (entry.element for entry in self.max_heap)

    def __repr__(self) -> str:
        return f"MinMaxBinaryHeap({list(self)!r})"

    def append(self, other: MinMaxBinaryHeap[T]) -> None:
        """Move every element of ``other`` into this heap, leaving ``other`` empty."""
        if len(self) < len(other):
            self.min_heap, other.min_heap = other.min_heap, self.min_heap
            self.max_heap, other.max_heap = other.max_heap, self.max_heap
        for entry in other.min_heap.drain():
            self.min_heap.push(entry)
        for entry in other.max_heap.drain():
            self.max_heap.push(entry)

    def clear(self) -> None:
        self.min_heap.clear()
        self.max_heap.clear()

    def drain(self) -> Iterator[T]:
        """Empty the heap and iterate over its former elements in storage order."""
        self.min_heap.clear()
        return iter([entry.element for entry in self.max_heap.drain()])

    def _drain_sorted(self, order: HeapOrder) -> Iterator[T]:
        heap, other = self._heaps(order)
        other.clear()
        elements: List[T] = []
        while (entry := heap.pop()) is not None:
            elements.append(entry.element)
        return iter(elements)

    def drain_sorted_asc(self) -> Iterator[T]:
        """Empty the heap and iterate over its former elements, smallest first."""
        return self._drain_sorted(HeapOrder.MIN)

    def drain_sorted_desc(self) -> Iterator[T]:
        """Empty the heap and iterate over its former elements, largest first."""
        return self._drain_sorted(HeapOrder.MAX)

    def _iter_sorted(self, order: HeapOrder) -> Iterator[T]:
        snapshot: Heap[T] = Heap(order)
        for entry in self.max_heap:
            snapshot.push(Entry(entry.element))

        def pop_all() -> Iterator[T]:
            while (popped := snapshot.pop()) is not None:
                yield popped.element

        return pop_all()

    def iter_sorted_asc(self) -> Iterator[T]:
        """The current elements, smallest first, leaving the heap unchanged."""
        return self._iter_sorted(HeapOrder.MIN)

    def iter_sorted_desc(self) -> Iterator[T]:
        """The current elements, largest first, leaving the heap unchanged."""
        return self._iter_sorted(HeapOrder.MAX)

    def _peek(self, order: HeapOrder) -> Optional[T]:
        heap, _ = self._heaps(order)
        entry = heap.peek()
        return None if entry is None else entry.element

    def peek_min(self) -> Optional[T]:
        """The smallest element, or None when empty."""
        return self._peek(HeapOrder.MIN)

    def peek_max(self) -> Optional[T]:
        """The largest element, or None when empty."""
        return self._peek(HeapOrder.MAX)

    def _peek_mut(self, order: HeapOrder) -> Optional[PeekMut[T]]:
        if not self:
            return None
        return PeekMut(self.min_heap, self.max_heap, order)

    def peek_min_mut(self) -> Optional[PeekMut[T]]:
        """A handle to replace or remove the smallest element, or None when empty."""
        return self._peek_mut(HeapOrder.MIN)

    def peek_max_mut(self) -> Optional[PeekMut[T]]:
        """A handle to replace or remove the largest element, or None when empty."""
        return self._peek_mut(HeapOrder.MAX)

    def _pop(self, order: HeapOrder) -> Optional[T]:
        heap, other = self._heaps(order)
        entry = heap.pop()
        if entry is None:
            return None
        other.remove(order.other.get_index(entry))
        return entry.element

    def pop_min(self) -> Optional[T]:
        """Remove and return the smallest element, or None when empty."""
        return self._pop(HeapOrder.MIN)

    def pop_max(self) -> Optional[T]:
        """Remove and return the largest element, or None when empty."""
        return self._pop(HeapOrder.MAX)

    def push(self, element: T) -> None:
        entry = Entry(element)
        self.min_heap.push(entry)
        self.max_heap.push(entry)

    def extend(self, iterable: Iterable[T]) -> None:
        for element in iterable:
            self.push(element)

    def retain(self, predicate: Callable[[T], Any]) -> None:
        """Keep only the elements for which ``predicate`` is true."""
        removed = self.max_heap.retain(lambda entry: bool(predicate(entry.element)))
        for entry in removed:
            self.min_heap.remove(entry.min_heap_index)