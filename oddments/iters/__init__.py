"""Lazy helpers for counting, forking, trimming and grouping iterables."""

__all__ = [
    "count_is",
    "count_satisfies",
    "evaluation",
    "fork",
    "group_into",
    "tail_skip",
]