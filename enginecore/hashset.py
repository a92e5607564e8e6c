"""An unordered set of unique items."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, Set, Tuple, TypeVar

from .array import DynArray

T = TypeVar("T")


class HashSet(Generic[T]):
    """An unordered collection of unique, hashable items."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Set[T] = set(items) if items is not None else set()

    def add(self, item: T) -> None:
        self._items.add(item)

    def emplace(self, item: T) -> Tuple[T, bool]:
        """Insert ``item``; return the stored item and whether it was new."""
        for existing in self._items:
            if existing == item:
                return existing, False
        self._items.add(item)
        return item, True

    def find(self, item: T) -> Optional[T]:
        """Return the stored item equal to ``item``, or None."""
        if item not in self._items:
            return None
        return next(existing for existing in self._items if existing == item)

    def to_array(self) -> DynArray[T]:
        """Copy the items into a :class:`DynArray`."""
        result: DynArray[T] = DynArray()
        result.reserve(len(self._items))
        for item in self._items:
            result.add(item)
        return result

    def remove(self, item: T) -> int:
        """Remove ``item``; return 1 if it was present, else 0."""
        if item in self._items:
            self._items.remove(item)
            return 1
        return 0

    def empty(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def contains(self, item: T) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashSet({self._items!r})"