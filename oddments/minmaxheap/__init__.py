"""A binary heap giving access to both its smallest and largest element."""

__all__ = ["heap", "minmax", "peek"]