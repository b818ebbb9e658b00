"""A last-in/first-out collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from cslib.vector import _format_collection


class Stack:
    """Values are pushed onto and popped from the top only."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._elements: list[Any] = list(items)

    def __len__(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._elements

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def push(self, value: Any) -> None:
        """Push ``value`` onto the top."""
        self._elements.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._elements:
            raise IndexError("pop: Attempting to pop an empty stack")
        return self._elements.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._elements:
            raise IndexError("peek: Attempting to peek at an empty stack")
        return self._elements[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._elements == other._elements

    def __str__(self) -> str:
        return _format_collection(self._elements)

    def __repr__(self) -> str:
        return f"Stack({self._elements!r})"