"""Key/value pairs and a hash map that yields them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Pair(Generic[K, V]):
    """A key together with its value."""

    key: K
    value: V

    def __iter__(self) -> Iterator:
        yield self.key
        yield self.value

    def as_tuple(self) -> Tuple[K, V]:
        return (self.key, self.value)


def make_pair(first: K, second: V) -> Pair[K, V]:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


class HashMap(Generic[K, V]):
    """An unordered mapping whose iteration yields :class:`Pair` objects."""

    __slots__ = ("_data",)

    def __init__(self, items=None) -> None:
        self._data: Dict[K, V] = dict(items) if items is not None else {}

    def add(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its value."""
        self._data[key] = value

    def emplace(self, key: K, value: V) -> bool:
        """Insert ``key`` only if it is absent; return whether it was inserted."""
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def remove(self, key: K) -> None:
        """Remove ``key`` if present."""
        self._data.pop(key, None)

    def empty(self) -> None:
        self._data.clear()

    def contains(self, key: K) -> bool:
        return key in self._data

    def find(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None if it is missing."""
        return self._data.get(key)

    def is_empty(self) -> bool:
        return not self._data

    def reserve(self, number: int) -> None:
        """Accepts a size hint; Python dicts grow on their own."""
        if number < 0:
            raise ValueError(f"number must not be negative, got {number}")

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __iter__(self) -> Iterator[Pair[K, V]]:
        for key, value in self._data.items():
            yield Pair(key, value)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashMap({self._data!r})"