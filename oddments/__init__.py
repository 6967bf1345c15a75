"""Lazy iterator helpers and a min-max binary heap."""

__version__ = "0.1.0"