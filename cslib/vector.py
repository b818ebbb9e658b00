"""An ordered, index-checked sequence of values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(text: str) -> str:
    """Return ``text`` in double quotes with special characters escaped."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif not ch.isprintable():
            parts.append(f"\\{ord(ch):03o}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _format_value(value: Any) -> str:
    """Format one element for a collection's printed form; strings are quoted."""
    if isinstance(value, str):
        return _quote(value)
    return str(value)


def _format_collection(values: Iterable[Any]) -> str:
    return "{" + ", ".join(_format_value(v) for v in values) + "}"


class Vector:
    """A list of values with strict bounds checking on every index."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    @classmethod
    def filled(cls, n: int, value: Any = None) -> "Vector":
        """Create a vector of ``n`` elements, each equal to ``value``."""
        if n < 0:
            raise ValueError("filled: size must not be negative")
        return cls([value] * n)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True if the vector holds no elements."""
        return not self._items

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def _check(self, index: int, message: str) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(message)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check(index, "get: index out of range")
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check(index, "set: index out of range")
        self._items[index] = value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert: index out of range")
        self._items.insert(index, value)

    def remove(self, index: int) -> None:
        """Remove the element at ``index``, shifting later elements left."""
        self._check(index, "remove: index out of range")
        del self._items[index]

    def add(self, value: Any) -> None:
        """Append ``value`` to the end."""
        self._items.append(value)

    def __getitem__(self, index: int) -> Any:
        self._check(index, "Selection index out of range")
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index, "Selection index out of range")
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._items + other._items)

    def __iadd__(self, other: Any) -> "Vector":
        """Append every element of another Vector, or a single value."""
        if isinstance(other, Vector):
            self._items.extend(list(other._items))
        else:
            self._items.append(other)
        return self

    def map_all(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element in index order."""
        for value in self._items:
            fn(value)

    def __str__(self) -> str:
        return _format_collection(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"