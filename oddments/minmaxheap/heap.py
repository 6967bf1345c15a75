"""Binary heaps of shared entries that each remember their place in two heaps."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Entry(Generic[T]):
    """An element together with its index in the min heap and in the max heap."""

    element: T
    min_heap_index: int = 0
    max_heap_index: int = 0


class HeapOrder(enum.Enum):
    """Which end of the ordering a heap keeps at its root."""

    MIN = "min"
    MAX = "max"

    @property
    def other(self) -> HeapOrder:
        return HeapOrder.MAX if self is HeapOrder.MIN else HeapOrder.MIN

    def comes_before(self, a: Any, b: Any) -> bool:
        """Whether ``a`` may sit above ``b`` in a heap of this order."""
        return a <= b if self is HeapOrder.MIN else a >= b

    def get_index(self, entry: Entry[Any]) -> int:
        """The entry's index in the heap of this order."""
        return entry.min_heap_index if self is HeapOrder.MIN else entry.max_heap_index

    def set_index(self, entry: Entry[Any], index: int) -> None:
        """Record the entry's index in the heap of this order."""
        if self is HeapOrder.MIN:
            entry.min_heap_index = index
        else:
            entry.max_heap_index = index


class Heap(Generic[T]):
    """A binary heap of entries that keeps each entry's own index up to date."""

    def __init__(self, order: HeapOrder) -> None:
        self.order = order
        self._entries: List[Entry[T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry[T]]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Entry[T]:
        return self._entries[index]

    def __repr__(self) -> str:
        elements = [entry.element for entry in self._entries]
        return f"Heap({self.order.name}, {elements!r})"

    def push(self, entry: Entry[T]) -> None:
        """Add ``entry`` and restore the heap order."""
        self.order.set_index(entry, len(self._entries))
        self._entries.append(entry)
        self.heap_up(len(self._entries) - 1)

    def pop(self) -> Optional[Entry[T]]:
        """Remove and return the root entry, or None when empty."""
        if not self._entries:
            return None
        return self.remove(0)

    def peek(self) -> Optional[Entry[T]]:
        """The root entry, or None when empty."""
        return self._entries[0] if self._entries else None

    def remove(self, index: int) -> Entry[T]:
        """Remove and return the entry at ``index``, keeping the heap valid."""
        entry = self._swap_remove(index)
        if index < len(self._entries):
            self.heap_up_and_down(index)
        return entry

    def _swap_remove(self, index: int) -> Entry[T]:
        entry = self._entries[index]
        last = self._entries.pop()
        if index < len(self._entries):
            self._entries[index] = last
            self.order.set_index(last, index)
        return entry

    def retain(self, predicate: Callable[[Entry[T]], bool]) -> List[Entry[T]]:
        """Keep the entries ``predicate`` accepts; return the removed ones."""
        removed: List[Entry[T]] = []
        index = 0
        while index < len(self._entries):
            if predicate(self._entries[index]):
                self.heap_up(index)
                index += 1
            else:
                removed.append(self._swap_remove(index))
        return removed

    def heap_up_and_down(self, index: int) -> None:
        """Move the entry at ``index`` to where it belongs."""
        self._heap_down(index)
        self.heap_up(index)

    def _swap(self, i: int, j: int) -> None:
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self.order.set_index(entries[i], i)
        self.order.set_index(entries[j], j)

    def heap_up(self, index: int) -> None:
        """Move the entry at ``index`` towards the root while it must."""
        while index > 0:
            parent = (index - 1) // 2
            if self.order.comes_before(
                self._entries[parent].element, self._entries[index].element
            ):
                break
            self._swap(index, parent)
            index = parent

    def _heap_down(self, index: int) -> None:
        size = len(self._entries)
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self.order.comes_before(
                self._entries[right].element, self._entries[left].element
            ):
                child = right
            if self.order.comes_before(
                self._entries[index].element, self._entries[child].element
            ):
                break
            self._swap(index, child)
            index = child

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def drain(self) -> List[Entry[T]]:
        """Remove every entry and return them in heap storage order."""
        entries, self._entries = self._entries, []
        return entries