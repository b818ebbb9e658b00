"""A collection of distinct values kept in ascending order."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from cslib.vector import _format_collection


def _identity(value: Any) -> Any:
    return value


class SortedSet:
    """Distinct values, ordered by ``key`` (the values themselves by default).

    Two values are the same element when neither key sorts before the other.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        items: Iterable[Any] = (),
        key: Callable[[Any], Any] | None = None,
    ) -> None:
        self._key: Callable[[Any], Any] = key if key is not None else _identity
        self._keys: list[Any] = []
        self._values: list[Any] = []
        for item in items:
            self.add(item)

    def _empty_like(self) -> "SortedSet":
        return SortedSet(key=self._key)

    def _copy(self) -> "SortedSet":
        result = self._empty_like()
        result._keys = list(self._keys)
        result._values = list(self._values)
        return result

    def _locate(self, value: Any) -> tuple[int, Any, bool]:
        k = self._key(value)
        index = bisect_left(self._keys, k)
        found = index < len(self._keys) and not k < self._keys[index]
        return index, k, found

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        """Return True if the set holds no elements."""
        return not self._values

    def add(self, value: Any) -> None:
        """Add ``value`` unless an equal element is already present."""
        index, k, found = self._locate(value)
        if not found:
            self._keys.insert(index, k)
            self._values.insert(index, value)

    def remove(self, value: Any) -> None:
        """Remove ``value`` if present; otherwise leave the set unchanged."""
        index, _, found = self._locate(value)
        if found:
            del self._keys[index]
            del self._values[index]

    def __contains__(self, value: object) -> bool:
        return self._locate(value)[2]

    def is_subset_of(self, other: "SortedSet") -> bool:
        """Return True if every element of this set is in ``other``."""
        return all(value in other for value in self._values)

    def clear(self) -> None:
        """Remove every element."""
        self._keys.clear()
        self._values.clear()

    def first(self) -> Any:
        """Return the smallest element."""
        if not self._values:
            raise ValueError("first: set is empty")
        return self._values[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        for mine, theirs in zip(self._values, other._values):
            a, b = self._key(mine), self._key(theirs)
            if a < b or b < a:
                return False
        return True

    def __add__(self, other: Any) -> "SortedSet":
        """Union with another set, or this set with one element added."""
        result = self._copy()
        result += other
        return result

    def __mul__(self, other: "SortedSet") -> "SortedSet":
        """Intersection: elements of this set that are also in ``other``."""
        if not isinstance(other, SortedSet):
            return NotImplemented
        result = self._empty_like()
        for value in self._values:
            if value in other:
                result.add(value)
        return result

    def __sub__(self, other: Any) -> "SortedSet":
        """Difference with another set, or this set with one element removed."""
        result = self._copy()
        result -= other
        return result

    def __iadd__(self, other: Any) -> "SortedSet":
        if isinstance(other, SortedSet):
            for value in list(other._values):
                self.add(value)
        else:
            self.add(other)
        return self

    def __imul__(self, other: "SortedSet") -> "SortedSet":
        if not isinstance(other, SortedSet):
            return NotImplemented
        for value in [v for v in self._values if v not in other]:
            self.remove(value)
        return self

    def __isub__(self, other: Any) -> "SortedSet":
        if isinstance(other, SortedSet):
            for value in [v for v in self._values if v in other]:
                self.remove(value)
        else:
            self.remove(other)
        return self

    def map_all(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element in ascending order."""
        for value in list(self._values):
            fn(value)

    def __str__(self) -> str:
        return _format_collection(self._values)

    def __repr__(self) -> str:
        return f"SortedSet({self._values!r})"