"""Group the elements of an iterable by key into collections."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _group(iterable: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    groups: Dict[K, List[T]] = {}
    for item in iterable:
        groups.setdefault(key(item), []).append(item)
    return groups


def group_into_dict(
    iterable: Iterable[T],
    key: Callable[[T], K],
    factory: Callable[[List[T]], Any] = list,
) -> Dict[K, Any]:
    """Group elements by ``key``; ``factory`` builds each group's collection from its items.

    Keys appear in the order they are first met; items keep their order within a group.
    """
    return {k: factory(items) for k, items in _group(iterable, key).items()}


def group_into_sorted_dict(
    iterable: Iterable[T],
    key: Callable[[T], K],
    factory: Callable[[List[T]], Any] = list,
) -> Dict[K, Any]:
    """Like :func:`group_into_dict`, with the keys in ascending order."""
    groups = _group(iterable, key)
    return {k: factory(groups[k]) for k in sorted(groups)}