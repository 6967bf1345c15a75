"""Mutable access to the smallest or largest element of a min-max heap."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from oddments.minmaxheap.heap import Entry, Heap, HeapOrder

T = TypeVar("T")


class PeekMut(Generic[T]):
    """The root element of one of the two heaps, open for replacement or removal.

    Assigning to :attr:`value` replaces the element and moves it to its proper
    place in both heaps. :meth:`pop` removes it from both heaps. Used as a
    context manager, the handle becomes unusable when the block ends.
    """

    __slots__ = ("_min_heap", "_max_heap", "_entry")

    def __init__(self, min_heap: Heap[T], max_heap: Heap[T], order: HeapOrder) -> None:
        self._min_heap = min_heap
        self._max_heap = max_heap
        heap = min_heap if order is HeapOrder.MIN else max_heap
        entry = heap.peek()
        if entry is None:
            raise IndexError("peek into an empty heap")
        self._entry: Optional[Entry[T]] = entry

    def _live_entry(self) -> Entry[T]:
        if self._entry is None:
            raise RuntimeError("the peeked element is no longer available")
        return self._entry

    @property
    def value(self) -> T:
        """The peeked element."""
        return self._live_entry().element

    @value.setter
    def value(self, new_value: T) -> None:
        entry = self._live_entry()
        entry.element = new_value
        self._min_heap.heap_up_and_down(entry.min_heap_index)
        self._max_heap.heap_up_and_down(entry.max_heap_index)

    def pop(self) -> T:
        """Remove the peeked element from both heaps and return it."""
        entry = self._live_entry()
        self._entry = None
        self._min_heap.remove(entry.min_heap_index)
        self._max_heap.remove(entry.max_heap_index)
        return entry.element

    def __enter__(self) -> PeekMut[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self._entry = None

    def __repr__(self) -> str:
        if self._entry is None:
            return "PeekMut(<released>)"
        return f"PeekMut({self._entry.element!r})"