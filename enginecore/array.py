"""A growable array with engine-style helpers on top of a Python list."""

from __future__ import annotations

import functools
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union, overload

T = TypeVar("T")

INDEX_NONE = -1


class DynArray(Generic[T]):
    """An ordered, growable sequence of items.

    Lookups return :data:`INDEX_NONE` instead of raising when an item is
    missing, and out-of-range removals are ignored.
    """

    __slots__ = ("_items", "_reserved")

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = list(items) if items is not None else []
        self._reserved = 0

    def init(self, element: T, number: int) -> None:
        """Replace the contents with ``number`` copies of ``element``."""
        if number < 0:
            raise ValueError(f"number must not be negative, got {number}")
        self._items = [element] * number

    def add(self, item: T) -> int:
        """Append ``item`` and return its index."""
        self._items.append(item)
        return len(self._items) - 1

    def add_unique(self, item: T) -> int:
        """Return the index of ``item``, appending it first if it is not present."""
        index = self.find(item)
        if index != INDEX_NONE:
            return index
        return self.add(item)

    def empty(self) -> None:
        """Remove every item."""
        self._items.clear()

    def remove(self, item: T) -> int:
        """Remove every item equal to ``item``; return how many were removed."""
        before = len(self._items)
        self._items = [existing for existing in self._items if existing != item]
        return before - len(self._items)

    def remove_single(self, item: T) -> bool:
        """Remove the first item equal to ``item``; return whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``; indices outside ``[0, len)`` are ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def remove_all(self, predicate: Callable[[T], bool]) -> int:
        """Remove every item for which ``predicate`` is true; return how many."""
        before = len(self._items)
        self._items = [item for item in self._items if not predicate(item)]
        return before - len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def find(self, item: T) -> int:
        """Return the index of the first item equal to ``item``, or ``INDEX_NONE``."""
        try:
            return self._items.index(item)
        except ValueError:
            return INDEX_NONE

    def reserve(self, number: int) -> None:
        """Make room for at least ``number`` items."""
        if number < 0:
            raise ValueError(f"number must not be negative, got {number}")
        self._reserved = max(self._reserved, number)

    def capacity(self) -> int:
        """Number of items the array can hold without growing."""
        return max(self._reserved, len(self._items))

    def sort(self, less: Optional[Callable[[T, T], bool]] = None) -> None:
        """Sort in place, by natural order or by a strict less-than predicate."""
        if less is None:
            self._items.sort()
            return

        def compare(a: T, b: T) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        self._items.sort(key=functools.cmp_to_key(compare))

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "DynArray[T]": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return DynArray(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"