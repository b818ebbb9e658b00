"""Bounds-checked Vector, Stack and SortedSet collections and a configurable token scanner."""

__version__ = "0.1.0"
__all__ = ["vector", "stack", "sortedset", "tokenscanner"]