"""Leave out the last elements of an iterable, lazily."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, TypeVar

T = TypeVar("T")


def _tail_skip(iterator: Iterator[T], n: int) -> Iterator[T]:
    queue: Deque[T] = deque()
    for item in iterator:
        queue.append(item)
        if len(queue) > n:
            yield queue.popleft()


def tail_skip(iterable: Iterable[T], n: int) -> Iterator[T]:
    """Yield every element of ``iterable`` except the last ``n``.

    At most ``n`` elements are held back at any time, so the source may be endless.
    """
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    return _tail_skip(iter(iterable), n)