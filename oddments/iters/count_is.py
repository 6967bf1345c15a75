"""Compare the length of an iterable with a number, consuming only what is needed."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from oddments.iters.evaluation import Eq, Evaluator, Gt, Lt, Not

_MISSING = object()


def _check_count(other: Any) -> bool:
    if isinstance(other, bool) or not isinstance(other, int):
        return False
    if other < 0:
        raise ValueError(f"count must not be negative: {other}")
    return True


class CountIs:
    """The yet-unknown length of an iterator, comparable with non-negative integers.

    Each comparison consumes from the iterator only as many elements as it needs
    to decide; later comparisons continue from where the previous one stopped.
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterator: Iterator[Any] = iter(iterable)

    def _evaluate(self, evaluator: Evaluator) -> bool:
        return evaluator.evaluate(self._iterator)

    def __eq__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return self._evaluate(Eq(other))

    def __ne__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return not self._evaluate(Eq(other))

    def __lt__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return self._evaluate(Lt(other))

    def __gt__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return self._evaluate(Gt(other))

    def __le__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return self._evaluate(Not(Gt(other)))

    def __ge__(self, other: Any) -> Any:
        if not _check_count(other):
            return NotImplemented
        return self._evaluate(Not(Lt(other)))

    __hash__ = None  # type: ignore[assignment]

    def compare(self, other: int) -> int:
        """-1, 0 or 1 as the length is less than, equal to or greater than ``other``."""
        if not _check_count(other):
            raise TypeError(f"count must be an integer, not {type(other).__name__}")

        if other == 0:
            consumed = 0 if next(self._iterator, _MISSING) is _MISSING else 1
        else:
            consumed = other - 1
            skipped_all = True
            for _ in range(consumed):
                if next(self._iterator, _MISSING) is _MISSING:
                    skipped_all = False
                    break
            if skipped_all and next(self._iterator, _MISSING) is not _MISSING:
                consumed += 1
                if next(self._iterator, _MISSING) is not _MISSING:
                    consumed += 1

        return (consumed > other) - (consumed < other)

    def __repr__(self) -> str:
        return f"CountIs({self._iterator!r})"


def count_is(iterable: Iterable[Any]) -> CountIs:
    """The length of ``iterable``, to be compared with an integer."""
    return CountIs(iterable)