"""Split one iterable into two iterators that each see every element."""

from __future__ import annotations

import enum
from collections import deque
from typing import Any, Deque, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


class _ForkId(enum.Enum):
    FIRST = "first"
    SECOND = "second"

    def other(self) -> _ForkId:
        return _ForkId.SECOND if self is _ForkId.FIRST else _ForkId.FIRST


class _State(Generic[T]):
    """Source and buffer shared by the two forks.

    While both forks are alive, ``pending_fork`` names the fork the buffered
    elements are waiting for. Once one fork is closed it becomes None and the
    remaining fork drains the buffer before reading the source again.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self.source: Iterator[T] = iter(iterable)
        self.pending: Deque[T] = deque()
        self.paired = True
        self.pending_fork: Optional[_ForkId] = _ForkId.FIRST

    def next_for(self, fork_id: _ForkId) -> Any:
        other = fork_id.other()
        if not (self.paired and self.pending_fork is other) and self.pending:
            return self.pending.popleft()

        value = next(self.source, _MISSING)
        if value is not _MISSING and self.paired:
            self.pending.append(value)
            self.pending_fork = other
        return value

    def release(self, fork_id: _ForkId) -> None:
        if not self.paired:
            return
        if self.pending_fork is fork_id:
            self.pending.clear()
        self.paired = False
        self.pending_fork = None


class ForkIter(Generic[T]):
    """One of the two iterators returned by :func:`fork`."""

    __slots__ = ("_fork_id", "_state", "_closed")

    def __init__(self, state: _State[T], fork_id: _ForkId) -> None:
        self._state = state
        self._fork_id = fork_id
        self._closed = False

    def __iter__(self) -> ForkIter[T]:
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        value = self._state.next_for(self._fork_id)
        if value is _MISSING:
            raise StopIteration
        return value

    def close(self) -> None:
        """Stop this fork; the other one no longer buffers elements for it."""
        if self._closed:
            return
        self._closed = True
        self._state.release(self._fork_id)

    def __enter__(self) -> ForkIter[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except AttributeError:
            pass

    def __repr__(self) -> str:
        return f"ForkIter({self._fork_id.value}, closed={self._closed})"


def fork(iterable: Iterable[T]) -> Tuple[ForkIter[T], ForkIter[T]]:
    """Two iterators over the same elements of ``iterable``, read from it only once.

    Elements read by one fork are buffered until the other fork reaches them.
    Closing one fork lets the other run without buffering.
    """
    state: _State[T] = _State(iterable)
    return ForkIter(state, _ForkId.FIRST), ForkIter(state, _ForkId.SECOND)