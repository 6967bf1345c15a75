"""Test the length of an iterable against a condition built on a count placeholder."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from oddments.iters.evaluation import Eq, Evaluator, Gt, Lt, Not


class N:
    """Stands for the length of the iterable when building a condition.

    Conditions can be written with methods (``n.lt(2).or_(n.eq(4))``) or with
    operators (``(n < 2) | (n == 4)``, ``~(n < 2)``, ``(n > 0) & (n < 3)``).
    """

    __slots__ = ()

    def eq(self, tested_count: int) -> Evaluator:
        return Eq(tested_count)

    def ne(self, tested_count: int) -> Evaluator:
        return Not(Eq(tested_count))

    def lt(self, tested_count: int) -> Evaluator:
        return Lt(tested_count)

    def gt(self, tested_count: int) -> Evaluator:
        return Gt(tested_count)

    def le(self, tested_count: int) -> Evaluator:
        return Not(Gt(tested_count))

    def ge(self, tested_count: int) -> Evaluator:
        return Not(Lt(tested_count))

    def __eq__(self, other: Any) -> Any:
        return self.eq(other) if isinstance(other, int) else NotImplemented

    def __ne__(self, other: Any) -> Any:
        return self.ne(other) if isinstance(other, int) else NotImplemented

    def __lt__(self, other: Any) -> Any:
        return self.lt(other) if isinstance(other, int) else NotImplemented

    def __gt__(self, other: Any) -> Any:
        return self.gt(other) if isinstance(other, int) else NotImplemented

    def __le__(self, other: Any) -> Any:
        return self.le(other) if isinstance(other, int) else NotImplemented

    def __ge__(self, other: Any) -> Any:
        return self.ge(other) if isinstance(other, int) else NotImplemented

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return "N"


def count_satisfies(iterable: Iterable[Any], condition: Callable[[N], Evaluator]) -> bool:
    """Whether the length of ``iterable`` satisfies ``condition``, consuming only what is needed."""
    return condition(N()).evaluate(iterable)