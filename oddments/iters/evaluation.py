"""Conditions on the length of an iterable that consume only as much as needed."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, NamedTuple, Optional

_MISSING = object()


class Output(NamedTuple):
    """Result at one count: the value, and the evaluator to go on with if it may change."""

    value: bool
    evaluation: Optional["Evaluator"]


class Evaluator(abc.ABC):
    """A condition on a count that knows when further elements cannot change it."""

    @abc.abstractmethod
    def evaluate_count(self, count: int) -> Output:
        """The condition's value at ``count``, and how to continue if more elements may matter."""

    def evaluate(self, iterable: Iterable[Any]) -> bool:
        """Decide the condition for the length of ``iterable``, consuming as few elements as possible."""
        iterator = iter(iterable)
        evaluator: Evaluator = self
        count = 0
        while True:
            value, following = evaluator.evaluate_count(count)
            if following is None:
                return value
            evaluator = following
            if next(iterator, _MISSING) is _MISSING:
                return value
            count += 1

    def not_(self) -> Evaluator:
        return Not(self)

    def or_(self, other: Evaluator) -> Evaluator:
        return Or(self, other)

    def and_(self, other: Evaluator) -> Evaluator:
        return And(self, other)

    def __invert__(self) -> Evaluator:
        return self.not_()

    def __or__(self, other: Evaluator) -> Evaluator:
        if not isinstance(other, Evaluator):
            return NotImplemented
        return self.or_(other)

    def __and__(self, other: Evaluator) -> Evaluator:
        if not isinstance(other, Evaluator):
            return NotImplemented
        return self.and_(other)


@dataclass(frozen=True)
class Eq(Evaluator):
    """The count equals ``tested_count``."""

    tested_count: int

    def evaluate_count(self, count: int) -> Output:
        return Output(
            count == self.tested_count, self if count <= self.tested_count else None
        )


@dataclass(frozen=True)
class Lt(Evaluator):
    """The count is less than ``tested_count``."""

    tested_count: int

    def evaluate_count(self, count: int) -> Output:
        below = count < self.tested_count
        return Output(below, self if below else None)


@dataclass(frozen=True)
class Gt(Evaluator):
    """The count is greater than ``tested_count``."""

    tested_count: int

    def evaluate_count(self, count: int) -> Output:
        return Output(
            count > self.tested_count, self if count <= self.tested_count else None
        )


@dataclass(frozen=True)
class Not(Evaluator):
    """The negation of another evaluator."""

    inner: Evaluator

    def evaluate_count(self, count: int) -> Output:
        value, following = self.inner.evaluate_count(count)
        return Output(not value, None if following is None else Not(following))


@dataclass(frozen=True)
class _BinaryLogical(Evaluator):
    """Two evaluators combined; a side that can no longer matter is dropped (None)."""

    first: Optional[Evaluator]
    second: Optional[Evaluator]

    _NEUTRAL: ClassVar[bool]

    def __post_init__(self) -> None:
        if self.first is None and self.second is None:
            raise ValueError("at least one operand is required")

    @staticmethod
    @abc.abstractmethod
    def _combine(a: bool, b: bool) -> bool:
        """Combine the values of both operands."""

    def evaluate_count(self, count: int) -> Output:
        cls = type(self)
        if self.first is None or self.second is None:
            only_first = self.second is None
            operand = self.first if only_first else self.second
            value, following = operand.evaluate_count(count)
            if following is None:
                return Output(value, None)
            return Output(value, cls(following, None) if only_first else cls(None, following))

        value1, following1 = self.first.evaluate_count(count)
        value2, following2 = self.second.evaluate_count(count)
        value = self._combine(value1, value2)

        if following1 is None and following2 is None:
            following = None
        elif following1 is None:
            following = cls(None, following2) if value1 == self._NEUTRAL else None
        elif following2 is None:
            following = cls(following1, None) if value2 == self._NEUTRAL else None
        else:
            following = cls(following1, following2)
        return Output(value, following)


class Or(_BinaryLogical):
    """True when either operand is true."""

    _NEUTRAL = False

    @staticmethod
    def _combine(a: bool, b: bool) -> bool:
        return a or b


class And(_BinaryLogical):
    """True when both operands are true."""

    _NEUTRAL = True

    @staticmethod
    def _combine(a: bool, b: bool) -> bool:
        return a and b